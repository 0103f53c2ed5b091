from fastapi import APIRouter

from app.dependencies import RegistryDep
from app.models.schemas import CipherInfo

router = APIRouter()


@router.get(
    "",
    response_model=list[CipherInfo],
    summary="List ciphers",
    description="List the cipher engines available for encryption and decryption.",
)
async def list_ciphers(registry: RegistryDep) -> list[CipherInfo]:
    return [
        CipherInfo(
            cipher_type=engine_class.cipher_type,
            cipher_family=engine_class.cipher_family,
            name=engine_class.name,
            description=engine_class.description,
        )
        for engine_class in registry.get_all_engines()
    ]
