"""
Console runner for the technique catalogue.

Completions are written to stdout for a human to read; logs go to stderr.
Provider errors are not caught: a failed call ends the run with the
provider's own exception, the same way a failed notebook cell halts.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from pydantic import ValidationError

from promptcraft.config import load_settings
from promptcraft.errors import ConfigurationError
from promptcraft.llm_adapter import GenerationConfig, LLMProvider, get_llm_provider
from promptcraft.logging.logger import setup_logging
from promptcraft.observability.metrics import render_metrics
from promptcraft.prompting import PromptChain, PromptFunction
from promptcraft.prompting.techniques import (
    CHAIN_EXAMPLE,
    TECHNIQUES,
    Technique,
    chain_stages,
    get_technique,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="promptcraft",
        description="Run prompt-engineering examples against a completion service.",
    )
    parser.add_argument("--env-file", default=None, help="Path to a .env file with LLM_* settings")
    parser.add_argument("--show-metrics", action="store_true", help="Print Prometheus metrics when done")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List available techniques")

    render = sub.add_parser("render", help="Print the bound prompt without calling the model")
    render.add_argument("technique")
    render.add_argument("--input", default=None, help="Input text ('-' reads stdin)")

    run = sub.add_parser("run", help="Run one technique and print the completion")
    run.add_argument("technique")
    run.add_argument("--input", default=None, help="Input text ('-' reads stdin)")
    run.add_argument("--max-tokens", type=int, default=None)
    run.add_argument("--temperature", type=float, default=None)
    run.add_argument("--top-p", type=float, default=None)

    chain = sub.add_parser("chain", help="Run techniques in order, feeding each output forward")
    chain.add_argument("techniques", nargs="*", default=list(CHAIN_EXAMPLE))
    chain.add_argument("--input", default=None, help="Input text ('-' reads stdin)")

    sub.add_parser("demo", help="Run every technique with its sample input")
    return parser


def _resolve_input(raw: str | None, technique: Technique) -> str:
    if raw is None:
        return technique.sample_input
    if raw == "-":
        return sys.stdin.read()
    return raw


def _resolve_config(args: argparse.Namespace, base: GenerationConfig) -> GenerationConfig:
    overrides = {
        "max_output_tokens": args.max_tokens,
        "temperature": args.temperature,
        "top_p": args.top_p,
    }
    values = base.model_dump()
    values.update({k: v for k, v in overrides.items() if v is not None})
    return GenerationConfig(**values)


def _cmd_list() -> None:
    width = max(len(key) for key in TECHNIQUES)
    for technique in TECHNIQUES.values():
        print(f"{technique.key:<{width}}  {technique.title}: {technique.description}")


async def _cmd_run(provider: LLMProvider, technique: Technique, config: GenerationConfig, text: str) -> None:
    fn = PromptFunction(technique.template, provider, config=config, name=technique.key)
    print(await fn.ainvoke(text))


async def _cmd_chain(provider: LLMProvider, keys: list[str], text: str | None) -> None:
    stages = chain_stages(keys)
    first = get_technique(keys[0])
    result = await PromptChain(provider, stages).arun(_resolve_input(text, first))
    for name, output in result.outputs:
        print(f"## {name}")
        print(output)
        print()


async def _cmd_demo(provider: LLMProvider) -> None:
    for technique in TECHNIQUES.values():
        if technique.key in CHAIN_EXAMPLE:
            continue
        print(f"=== {technique.title} ===")
        await _cmd_run(provider, technique, technique.config, technique.sample_input)
        print()
    print("=== Prompt chaining ===")
    await _cmd_chain(provider, list(CHAIN_EXAMPLE), None)


def _execute(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    try:
        if args.command == "list":
            _cmd_list()
            return 0

        if args.command == "render":
            technique = get_technique(args.technique)
            print(technique.template.bind(_resolve_input(args.input, technique)))
            return 0

        if args.command == "run":
            technique = get_technique(args.technique)
            try:
                config = _resolve_config(args, technique.config)
            except ValidationError as exc:
                parser.error(str(exc))
        elif args.command == "chain":
            for key in args.techniques:
                get_technique(key)
    except KeyError as exc:
        parser.error(exc.args[0])

    try:
        settings = load_settings(args.env_file)
    except ConfigurationError as exc:
        print(f"configuration error: {exc}", file=sys.stderr)
        return 1

    setup_logging("promptcraft", settings.log_level)
    provider = get_llm_provider(settings)

    # One event loop for the whole command: every completion shares the
    # provider's connection pool.
    if args.command == "run":
        asyncio.run(_cmd_run(provider, technique, config, _resolve_input(args.input, technique)))
    elif args.command == "chain":
        asyncio.run(_cmd_chain(provider, args.techniques, args.input))
    else:
        asyncio.run(_cmd_demo(provider))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    status = _execute(parser, args)
    if args.show_metrics:
        print(render_metrics())
    return status


if __name__ == "__main__":
    sys.exit(main())
