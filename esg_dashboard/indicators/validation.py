"""Coercion and validation of raw indicator values.

Each registered indicator maps to a pydantic field type built from its
definition (kind, bounds, integer flag, max length). Per-pillar payload
models are generated from those types.

The same coercion backs two callers with different failure policies:
snapshot normalization drops a bad field and carries on, while the metric
form layer (``validate_metric_payload``) rejects the whole payload with
the first error found. pydantic errors are translated to the package
``ValidationError`` with Spanish messages.
"""

from __future__ import annotations

from typing import Annotated, Any, Optional, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    TypeAdapter,
    create_model,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import ErrorDetails, PydanticCustomError

from esg_dashboard.errors import ValidationError
from esg_dashboard.indicators.registry import IndicatorDefinition, indicators_for_pillar
from esg_dashboard.models.enums import Indicator, Pillar, ValueKind

IndicatorValue = Union[float, int, bool, str, None]

_TRUE_STRINGS = {"true", "sí", "si", "1", "yes"}
_FALSE_STRINGS = {"false", "no", "0"}

PERIOD_MAX_LENGTH = 15

NOT_NUMERIC = "Debe ser numérico"
NOT_BOOLEAN = "Debe ser booleano"

_NUMERIC_ERROR_TYPES = {
    "float_type",
    "float_parsing",
    "int_type",
    "int_parsing",
    "finite_number",
}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_number(value: Any) -> Any:
    if _is_blank(value):
        return None
    if isinstance(value, bool):
        raise PydanticCustomError("indicator_numeric", NOT_NUMERIC)
    if isinstance(value, str):
        try:
            return float(value.strip().replace(",", ".", 1))
        except ValueError:
            raise PydanticCustomError("indicator_numeric", NOT_NUMERIC) from None
    return value


def _parse_boolean(value: Any) -> Optional[bool]:
    if _is_blank(value):
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        if value == 1:
            return True
        if value == 0:
            return False
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise PydanticCustomError("indicator_boolean", NOT_BOOLEAN)


def _parse_text(value: Any) -> Optional[str]:
    if _is_blank(value):
        return None
    return value.strip() if isinstance(value, str) else str(value)


def indicator_field_type(definition: IndicatorDefinition) -> Any:
    """pydantic type for one indicator; blank input validates to None."""
    if definition.kind == ValueKind.NUMERIC:
        if definition.integer:
            inner = Annotated[int, Field(ge=definition.minimum, le=definition.maximum)]
        else:
            inner = Annotated[
                float,
                Field(ge=definition.minimum, le=definition.maximum, allow_inf_nan=False),
            ]
        return Annotated[Optional[inner], BeforeValidator(_parse_number)]
    if definition.kind == ValueKind.BOOLEAN:
        return Annotated[Optional[bool], BeforeValidator(_parse_boolean)]
    return Annotated[
        Optional[Annotated[str, Field(max_length=definition.max_length)]],
        BeforeValidator(_parse_text),
    ]


class MetricPayloadBase(BaseModel):
    """Fields shared by every metric submission."""

    model_config = ConfigDict(extra="ignore")

    companyId: int = Field(gt=0)
    period: str = Field(min_length=1, max_length=PERIOD_MAX_LENGTH)

    @field_validator("period", mode="before")
    @classmethod
    def strip_period(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v


_ADAPTERS: dict[Indicator, TypeAdapter] = {}
_PAYLOAD_MODELS: dict[Pillar, type[MetricPayloadBase]] = {}


def _adapter(definition: IndicatorDefinition) -> TypeAdapter:
    adapter = _ADAPTERS.get(definition.indicator)
    if adapter is None:
        adapter = TypeAdapter(indicator_field_type(definition))
        _ADAPTERS[definition.indicator] = adapter
    return adapter


def metric_payload_model(pillar: Pillar) -> type[MetricPayloadBase]:
    """Payload model for one pillar, with an optional field per indicator."""
    model = _PAYLOAD_MODELS.get(pillar)
    if model is None:
        fields = {
            definition.key: (indicator_field_type(definition), None)
            for definition in indicators_for_pillar(pillar)
        }
        model = create_model(
            f"{pillar.value.capitalize()}MetricPayload", __base__=MetricPayloadBase, **fields
        )
        _PAYLOAD_MODELS[pillar] = model
    return model


def _base_field_message(field: str, error: ErrorDetails) -> str:
    if field == "companyId":
        if error["type"] == "greater_than":
            return "companyId debe ser positivo"
        return "companyId es requerido"
    if error["type"] == "string_too_long":
        return f"period debe tener menos de {PERIOD_MAX_LENGTH} caracteres"
    return "period es obligatorio"


def _indicator_message(error: ErrorDetails) -> str:
    kind = error["type"]
    ctx = error.get("ctx") or {}
    if kind == "greater_than_equal":
        return f"Debe ser mayor o igual a {ctx['ge']:g}"
    if kind == "less_than_equal":
        return f"Debe ser menor o igual a {ctx['le']:g}"
    if kind == "int_from_float":
        return "Debe ser un número entero"
    if kind == "string_too_long":
        return f"Debe tener como máximo {ctx['max_length']} caracteres"
    if kind in _NUMERIC_ERROR_TYPES:
        return NOT_NUMERIC
    return error["msg"]


def translate_error(exc: PydanticValidationError, field: Optional[str] = None) -> ValidationError:
    """First pydantic error as a package ValidationError."""
    error = exc.errors()[0]
    if field is None and error["loc"]:
        field = str(error["loc"][0])
    if field in ("companyId", "period"):
        return ValidationError(_base_field_message(field, error), field=field)
    return ValidationError(_indicator_message(error), field=field)


def coerce_value(definition: IndicatorDefinition, value: Any) -> IndicatorValue:
    """Coerce a raw API/form value to the indicator's kind.

    Blank input (None, empty or whitespace-only strings) becomes None.
    Raises ValidationError when the value cannot be coerced or is out of
    bounds.
    """
    try:
        return _adapter(definition).validate_python(value)
    except PydanticValidationError as e:
        raise translate_error(e, field=definition.key) from None


def validate_metric_payload(pillar: Pillar | str, payload: Any) -> dict[str, Any]:
    """Validate a metric form submission for one pillar.

    Returns ``{"companyId", "period", <indicator>: value, ...}`` with every
    indicator of the pillar present (None when not supplied). Unknown keys
    are ignored.
    """
    if not isinstance(payload, dict):
        raise ValidationError("El cuerpo de la solicitud es requerido")
    try:
        pillar = Pillar(pillar)
    except ValueError:
        raise ValidationError(f"Tipo de métrica no soportada: {pillar}") from None

    try:
        parsed = metric_payload_model(pillar).model_validate(payload)
    except PydanticValidationError as e:
        raise translate_error(e) from None
    return parsed.model_dump()


def validate_metrics_batch(pillar: Pillar | str, records: Any) -> list[dict[str, Any]]:
    """Validate a list of submissions; the first bad row aborts the batch."""
    if not isinstance(records, list):
        raise ValidationError("La importación debe enviarse como una lista")
    parsed = []
    for index, record in enumerate(records, start=1):
        try:
            parsed.append(validate_metric_payload(pillar, record))
        except ValidationError as e:
            period = record.get("period") if isinstance(record, dict) else None
            raise ValidationError(
                f"Fila {index} ({period or 'sin periodo'}): {e.message}", field=e.field
            ) from e
    return parsed
