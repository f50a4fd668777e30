"""CLI entry point for flowform.

Runs a form as an interactive conversation on stdin/stdout. This is a caller
of the orchestrator: it owns the session snapshot and advances it after every
accepted turn.
"""

import argparse
import asyncio
import dataclasses
import json
import sys
import uuid
from collections.abc import Callable, Iterable
from pathlib import Path

from flowform.config import PROVIDERS, Settings, create_llm_client
from flowform.core.errors import ClientError
from flowform.core.orchestrator import run_llm_step
from flowform.core.state import Session, SessionStatus
from flowform.forms.models import FormDefinition
from flowform.llm.base import LLMClient
from flowform.observability.logging import get_logger, setup_logging
from flowform.observability.tracing import TraceContext

logger = get_logger(__name__)


def load_form(path: Path) -> FormDefinition:
    """Load and validate a form definition from a JSON file."""
    form = FormDefinition.model_validate_json(path.read_text(encoding="utf-8"))
    logger.info("form_loaded", form_id=form.id, fields=len(form.fields), path=str(path))
    return form


def collected_values(form: FormDefinition, session: Session) -> dict[str, object]:
    """Collected values keyed by field name, in display order, JSON-safe."""
    values: dict[str, object] = {}
    for field in form.ordered_fields():
        if field.id in session.collected_field_ids():
            value = session.get_value(field.id)
            values[field.name] = value.isoformat() if hasattr(value, "isoformat") else value
    return values


async def converse(
    form: FormDefinition,
    session: Session,
    llm_client: LLMClient,
    lines: Iterable[str],
    write: Callable[[str], None] = print,
) -> Session:
    """Run turns for each input line until the form completes or input ends.

    Rejected turns (any ClientError) leave the session unchanged and the user
    is asked to try again. Other exceptions propagate.
    """
    for raw in lines:
        message = raw.strip()
        if not message:
            break

        with TraceContext("turn", session_id=session.id, turn=len(session.turns) // 2 + 1) as trace:
            try:
                result = await run_llm_step(form, session, message, llm_client)
            except ClientError as e:
                trace.annotate(rejected=True, error_code=e.error_code)
                logger.warning("turn_rejected", session_id=session.id, **e.to_dict())
                write(f"Sorry, I couldn't use that ({e.message}). Could you rephrase?")
                continue
            trace.annotate(rejected=False, complete=result.is_complete)

        session = session.apply_turn(form, message, result)
        logger.info(
            "turn_accepted",
            session_id=session.id,
            extracted=list(result.extracted_fields),
            next_field=result.next_field,
        )
        write(result.bot_response)

        if result.is_complete:
            logger.info("form_complete", session_id=session.id, form_id=form.id)
            return session

    logger.info("session_abandoned", session_id=session.id, form_id=form.id)
    return session.abandon()


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="FlowForm - fill a form by chatting")
    parser.add_argument(
        "form",
        type=Path,
        help="Path to a form definition JSON file",
    )
    parser.add_argument(
        "--provider",
        choices=list(PROVIDERS),
        help="LLM provider to use (default: FLOWFORM_PROVIDER or openai)",
    )
    parser.add_argument(
        "--model",
        type=str,
        help="Model name override",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: FLOWFORM_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write logs to this file",
    )

    args = parser.parse_args(argv)

    settings = Settings.from_env()
    overrides = {
        key: value
        for key, value in (("provider", args.provider), ("model", args.model), ("log_level", args.log_level))
        if value
    }
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    setup_logging(level=settings.log_level, log_file=args.log_file)

    try:
        form = load_form(args.form)
        logger.info("initializing_llm", provider=settings.provider)
        llm_client = create_llm_client(settings)

        session = Session.start(session_id=str(uuid.uuid4()), form=form)
        print(f"{form.name}" + (f" - {form.description}" if form.description else ""))
        print("Type your answers. An empty line quits.\n")

        session = await converse(form, session, llm_client, _stdin_lines())
    except KeyboardInterrupt:
        logger.info("interrupted_by_user")
        return 130
    except Exception as e:
        logger.error("fatal_error", error=str(e), exc_info=True)
        return 1

    if session.status != SessionStatus.COMPLETED:
        return 1

    print("\n" + json.dumps(collected_values(form, session), indent=2))
    return 0


def _stdin_lines() -> Iterable[str]:
    while True:
        try:
            yield input("> ")
        except EOFError:
            return


def cli_main():
    """Sync wrapper for CLI entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli_main()
