"""Interpretation of the model's structured reply.

The reply is untrusted input: it is parsed into :class:`ExtractionReply` or
rejected with one of the client errors. Values are not validated here.
"""

from __future__ import annotations

import json
import re
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, ValidationError

from flowform.core.errors import IncompleteResponseError, MalformedResponseError, UnknownFieldError
from flowform.core.prompt_builder import EXTRACTED_FIELDS_KEY, REPLY_TEXT_KEY
from flowform.forms.models import FormDefinition

# JSON scalars only; booleans, arrays and objects are not field values.
ExtractedValue = StrictStr | StrictInt | StrictFloat | None

_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


class ExtractionReply(BaseModel):
    """Parsed model reply: text for the user plus proposed field values."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    bot_response: Annotated[StrictStr, Field(alias=REPLY_TEXT_KEY)]
    extracted_fields: Annotated[dict[str, ExtractedValue], Field(alias=EXTRACTED_FIELDS_KEY)]


def _strip_code_fence(text: str) -> str:
    stripped = text.strip()
    match = _CODE_FENCE.match(stripped)
    return match.group(1) if match else stripped


def parse_extracted_fields(llm_response: str, form: FormDefinition) -> ExtractionReply:
    """
    Parse the raw reply and check it against the form.

    Raises:
        MalformedResponseError: the text is not JSON
        IncompleteResponseError: a required key is missing or has the wrong shape
        UnknownFieldError: an extracted key is not a field name in ``form``
    """
    try:
        parsed = json.loads(_strip_code_fence(llm_response))
    except ValueError as e:
        # JSONDecodeError, or an integer literal past the int digit limit
        raise MalformedResponseError(llm_response, str(e)) from e

    if not isinstance(parsed, dict) or REPLY_TEXT_KEY not in parsed or EXTRACTED_FIELDS_KEY not in parsed:
        raise IncompleteResponseError(llm_response)

    try:
        reply = ExtractionReply.model_validate(parsed)
    except ValidationError as e:
        details = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
        raise IncompleteResponseError(llm_response, details) from e

    valid_names = {f.name for f in form.fields}
    for field_name in reply.extracted_fields:
        if field_name not in valid_names:
            raise UnknownFieldError(field_name, form.id)

    return reply
