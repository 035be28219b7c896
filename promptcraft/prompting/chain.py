"""
Manual prompt chaining.

A chain is an ordered list of stages. Each stage's output text is passed,
verbatim, as the next stage's input. There is no planner and no branching:
stages run one after another and the first failure stops the chain.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from promptcraft.llm_adapter import GenerationConfig, LLMProvider
from promptcraft.prompting.function import PromptFunction
from promptcraft.prompting.template import PromptTemplate, as_template

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stage:
    name: str
    template: PromptTemplate
    config: GenerationConfig = field(default_factory=GenerationConfig)

    @classmethod
    def of(
        cls,
        name: str,
        template: PromptTemplate | str,
        config: GenerationConfig | None = None,
    ) -> Stage:
        return cls(name=name, template=as_template(template), config=config or GenerationConfig())


@dataclass
class ChainResult:
    input: str
    outputs: list[tuple[str, str]] = field(default_factory=list)

    @property
    def output(self) -> str:
        """Final stage output (the chain input if no stage ran)."""
        return self.outputs[-1][1] if self.outputs else self.input


async def run_stage(provider: LLMProvider, stage: Stage, previous_output: str) -> str:
    """Run one stage on the previous stage's output."""
    fn = PromptFunction(stage.template, provider, config=stage.config, name=stage.name)
    return await fn.ainvoke(previous_output)


class PromptChain:

    def __init__(self, provider: LLMProvider, stages: Sequence[Stage]) -> None:
        if not stages:
            raise ValueError("A prompt chain needs at least one stage.")
        self.provider = provider
        self.stages = list(stages)

    async def arun(self, input: str = "") -> ChainResult:
        result = ChainResult(input=input)
        current = input
        for index, stage in enumerate(self.stages, start=1):
            logger.info("Chain stage %d/%d: %s", index, len(self.stages), stage.name)
            current = await run_stage(self.provider, stage, current)
            result.outputs.append((stage.name, current))
        return result

    def run(self, input: str = "") -> ChainResult:
        return asyncio.run(self.arun(input))
