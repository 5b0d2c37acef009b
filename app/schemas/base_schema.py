from typing import Any, Dict, Generic, List, TypeVar, Optional, Union
from pydantic import BaseModel

T = TypeVar("T")

class Meta(BaseModel):
    page: Optional[int] = None
    page_size: Optional[int] = None
    total: Optional[int] = None

class ApiResponse(BaseModel, Generic[T]):
    success: bool
    data: Optional[T]
    meta: Optional[Meta] = None
    message: Optional[str] = None
    # lista de mensagens, ou mapa campo -> mensagem em erros de validação
    errors: Optional[Union[Dict[str, Any], List[Any]]] = None
    trace_id: Optional[str] = None
