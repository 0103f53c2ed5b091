import logging

from fastapi import APIRouter, HTTPException, status

from app.dependencies import RegistryDep, SettingsDep
from app.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse
from app.services.preprocessing.normalizer import TextNormalizer

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid key or text"},
    },
    summary="Encrypt text",
    description="Encrypt an open text with the route or Gronsfeld cipher. Non-letters are dropped and letters uppercased first.",
)
async def encrypt_text(
    request: EncryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> EncryptResponse:
    """
    Encrypt an open text with a specified cipher and key.

    Key and text errors are turned into 400 responses by the
    application's cipher error handler.
    """
    # Validate text length
    if len(request.text) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Text exceeds maximum length of {settings.max_text_length}",
        )

    engine = registry.create(request.cipher_type, request.key)

    normalized = TextNormalizer().normalize_full(request.text)
    ciphertext = engine.encrypt(normalized.text)
    logger.info("Encrypted %d letter(s) with %s", len(ciphertext), request.cipher_type.value)

    return EncryptResponse(
        ciphertext=ciphertext,
        cipher_type=request.cipher_type,
        key_used=engine.get_key(),
        normalized_text=normalized.text,
        removed_chars=normalized.removed_chars,
        explanation=engine.explain(normalized.text),
    )
