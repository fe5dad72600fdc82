"""Configuration validation endpoints."""

from fastapi import APIRouter

from railquote.application.config import (
    ConfigError,
    load_config_from_dict,
    validate_config,
)
from railquote.web.schemas.requests import ConfigValidateRequest
from railquote.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a quote configuration without pricing it.

    Schema errors are reported the same way as option errors so the
    caller gets one list of problems per field.

    Args:
        request: Request containing configuration to validate.

    Returns:
        Validation result with errors and warnings.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                {"message": d.get("message", e.message), "path": d.get("path", "")}
                for d in e.details
            ]
            or [{"message": e.message, "path": ""}],
        )

    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
