from promptcraft.prompting.chain import ChainResult, PromptChain, Stage, run_stage
from promptcraft.prompting.function import PromptFunction
from promptcraft.prompting.template import PLACEHOLDER_PATTERN, PromptTemplate

__all__ = [
    "ChainResult",
    "PLACEHOLDER_PATTERN",
    "PromptChain",
    "PromptFunction",
    "PromptTemplate",
    "Stage",
    "run_stage",
]
