import logging

from fastapi import APIRouter, HTTPException, status

from app.dependencies import RegistryDep, SettingsDep
from app.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid key or cipher text"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt a cipher text made of uppercase letters with the route or Gronsfeld cipher.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> DecryptResponse:
    """
    Decrypt a cipher text with a specified cipher and key.

    The cipher text is not normalized: anything but uppercase letters
    is rejected.
    """
    # Validate ciphertext length
    if len(request.text) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Ciphertext exceeds maximum length of {settings.max_text_length}",
        )

    engine = registry.create(request.cipher_type, request.key)
    plaintext = engine.decrypt(request.text)
    logger.info("Decrypted %d letter(s) with %s", len(plaintext), request.cipher_type.value)

    return DecryptResponse(
        plaintext=plaintext,
        cipher_type=request.cipher_type,
        key_used=engine.get_key(),
        explanation=engine.explain(request.text),
    )
