"""Demo data — accounts, catalog, settings and one listing per lifecycle state.

Idempotent: every user is keyed by e-mail and every type by name, so running
it on each start-up only fills in what is missing. Listings are only created
together with their owner, on the first run.
"""
import uuid
from datetime import timedelta
from decimal import Decimal
from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import (
    DEFAULT_PROPERTY_TYPES,
    AccountType,
    ContactOverride,
    PropertyStatus,
    UserRole,
    ValidationStatus,
)
from app.core.lifecycle import utcnow
from app.core.logging import get_logger
from app.models.property_model import Property
from app.repositories.property_repository import SqlPropertyRepository
from app.repositories.settings_repository import SqlPropertyTypeRepository, SqlSettingsRepository
from app.repositories.user_repository import SqlCredentialRepository, SqlUserRepository
from app.services.auth_service import AuthService

logger = get_logger(__name__)


def _picsum(seed: int, count: int) -> List[str]:
    return [f"https://picsum.photos/seed/{seed + i}/800/600" for i in range(count)]


DEMO_USERS = [
    {
        "name": "Ana Costa",
        "email": "ana@email.com",
        "password": "password123",
        "phone": "11987654321",
        "account_type": AccountType.PARTICULAR,
    },
    {
        "name": "Bruno Lima",
        "email": "bruno@email.com",
        "password": "password123",
        "phone": "21912345678",
        "account_type": AccountType.CORRETOR,
        "validation_status": ValidationStatus.APPROVED.value,
        "creci_number": "12345-F",
        "creci_state": "RJ",
        "document_type": "creci_fisico",
        "document_number": "12345-F",
        "document_url": "https://docs.exemplo.com/creci-fisico.pdf",
        "years_of_experience": "8",
        "service_regions": "Zona Sul / Centro - RJ",
        "specialties": "Imóveis residenciais de alto padrão, imóveis corporativos",
        "professional_website": "https://www.brunolima.com.br",
        "contact_preference": "whatsapp",
        "preferred_contact_time": "09h às 18h",
        "additional_notes": "Especialista em clientes internacionais.",
    },
    {
        "name": "Admin",
        "email": "admin@email.com",
        "password": "admin123",
        "phone": "99999999999",
        "account_type": AccountType.PARTICULAR,
        "role": UserRole.ADMIN,
    },
    {
        "name": "Carlos Dias",
        "email": "crdb.carlos@gmail.com",
        "password": "password123",
        "phone": "31988776655",
        "account_type": AccountType.IMOBILIARIA,
        "company_name": "Imobiliária Dias Ltda.",
        "cnpj": "12.345.678/0001-90",
        "creci_number": "54321-J",
        "creci_state": "MG",
        "document_type": "creci_juridico",
        "document_number": "54321-J",
        "document_url": "https://docs.exemplo.com/creci-juridico.pdf",
        "proof_of_address_url": "https://docs.exemplo.com/comprovante-endereco.pdf",
        "years_of_experience": "12",
        "service_regions": "Belo Horizonte, Nova Lima e região metropolitana",
        "specialties": "Lançamentos residenciais, imóveis comerciais e alto padrão",
        "professional_website": "https://www.imobiliariadias.com.br",
        "contact_preference": "email",
        "preferred_contact_time": "Horário comercial",
        "additional_notes": "Equipe dedicada para aprovação de crédito e compliance.",
        "team_size": "18",
    },
]


def _demo_properties(owners: Dict[str, uuid.UUID]) -> List[Property]:
    now = utcnow()
    ana, bruno = owners.get("ana@email.com"), owners.get("bruno@email.com")
    rows = [
        dict(
            owner_id=ana, title="Apartamento Moderno no Centro", type="Apartment",
            description="Lindo apartamento com 2 quartos, sala ampla e cozinha planejada. "
                        "Próximo a metrô, shoppings e parques.",
            city="São Paulo", neighborhood="Centro", price=Decimal("750000"),
            condo_fee=Decimal("800"), iptu=Decimal("150"), area=85, bedrooms=2, suites=1,
            bathrooms=2, garage_spots=1, images=_picsum(10, 6), latitude=-23.5505, longitude=-46.6333,
            created_at=now - timedelta(days=1), views=125, status=PropertyStatus.ACTIVE,
            expires_at=now + timedelta(days=30), is_furnished=True, pets_allowed=True,
        ),
        dict(
            owner_id=bruno, title="Casa Espaçosa com Piscina", type="House",
            description="Casa de alto padrão em condomínio fechado. Possui 4 suítes, área gourmet "
                        "com churrasqueira, piscina e um lindo jardim.",
            city="Rio de Janeiro", neighborhood="Barra da Tijuca", price=Decimal("2500000"),
            condo_fee=Decimal("1200"), iptu=Decimal("450"), area=320, bedrooms=4, suites=4,
            bathrooms=5, garage_spots=3, images=_picsum(20, 8), latitude=-22.9999, longitude=-43.3658,
            created_at=now - timedelta(days=5), views=340, status=PropertyStatus.ACTIVE,
            expires_at=now + timedelta(days=60), contact_override=ContactOverride.ADMIN,
            has_pool=True, pets_allowed=True,
        ),
        dict(
            owner_id=ana, title="Anúncio pendente de aprovação", type="House",
            description="Este anúncio foi pago e agora aguarda a aprovação do administrador.",
            city="Florianópolis", neighborhood="Centro", price=Decimal("950000"),
            area=150, bedrooms=3, suites=1, bathrooms=2, garage_spots=2, images=_picsum(70, 5),
            latitude=-27.5969, longitude=-48.5495, created_at=now - timedelta(days=1), views=2,
            status=PropertyStatus.PENDING_APPROVAL, expires_at=now + timedelta(days=30), pets_allowed=True,
        ),
        dict(
            owner_id=bruno, title="Anúncio aguardando pagamento", type="Land",
            description="Este anúncio foi criado e está aguardando o pagamento para ser enviado para aprovação.",
            city="Porto Alegre", neighborhood="Moinhos de Vento", price=Decimal("600000"),
            area=800, images=_picsum(80, 3), latitude=-30.0277, longitude=-51.2287,
            created_at=now - timedelta(days=1), views=5, status=PropertyStatus.PENDING_PAYMENT,
            expires_at=now + timedelta(days=30),
        ),
        dict(
            owner_id=ana, title="Cobertura com vista para o mar", type="Apartment",
            description="Anúncio recusado pela moderação; edite para reenviar.",
            city="Salvador", neighborhood="Barra", price=Decimal("1800000"), price_on_request=True,
            area=210, bedrooms=3, suites=2, bathrooms=3, garage_spots=2, images=[],
            created_at=now - timedelta(days=3), views=0, status=PropertyStatus.REJECTED,
            expires_at=now + timedelta(days=27),
        ),
        dict(
            owner_id=bruno, title="Studio mobiliado (expirado)", type="Apartment",
            description="Anúncio ativo cuja validade já terminou; não aparece na busca pública.",
            city="Rio de Janeiro", neighborhood="Botafogo", price=Decimal("420000"),
            area=32, bedrooms=1, suites=0, bathrooms=1, garage_spots=0, images=_picsum(90, 2),
            created_at=now - timedelta(days=45), views=57, status=PropertyStatus.ACTIVE,
            expires_at=now - timedelta(days=15), is_furnished=True,
        ),
    ]
    properties = []
    for row in rows:
        if row["owner_id"] is None:
            continue
        row["status"] = PropertyStatus(row["status"]).value
        row["contact_override"] = ContactOverride(row.get("contact_override", ContactOverride.OWNER)).value
        properties.append(Property(id=uuid.uuid4(), updated_at=row["created_at"], **row))
    return properties


async def seed_demo_data(db: AsyncSession) -> Dict[str, int]:
    """Insert whatever part of the demo data set is missing. Returns counts of created rows."""
    created = {"users": 0, "property_types": 0, "properties": 0}

    property_types = SqlPropertyTypeRepository(db)
    for name in DEFAULT_PROPERTY_TYPES:
        if await property_types.get_by_name(name) is None:
            await property_types.add(name)
            created["property_types"] += 1

    # Creates the settings row with the configured defaults
    await SqlSettingsRepository(db).get()

    users = SqlUserRepository(db)
    auth = AuthService(users, SqlCredentialRepository(db))
    new_owners: Dict[str, uuid.UUID] = {}
    for demo in DEMO_USERS:
        if await users.get_by_email(demo["email"]):
            continue
        fields = dict(demo)
        user = await auth.register(fields.pop("name"), fields.pop("email"), fields.pop("password"), **fields)
        new_owners[user.email] = user.id
        created["users"] += 1

    properties = SqlPropertyRepository(db)
    for prop in _demo_properties(new_owners):
        await properties.add(prop)
        created["properties"] += 1

    logger.info(
        "Demo data seeded: %d users, %d property types, %d properties",
        created["users"], created["property_types"], created["properties"],
    )
    return created
