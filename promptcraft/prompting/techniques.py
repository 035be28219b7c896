"""
Catalogue of prompt-engineering techniques.

Each technique is nothing more than template content plus the generation
settings it is demonstrated with. Few-shot examples, priming text and
delimiters all live inside the template; no technique adds logic of its own.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from promptcraft.llm_adapter import GenerationConfig
from promptcraft.prompting.chain import Stage
from promptcraft.prompting.template import PromptTemplate

APPLE_NEWS = (
    "Next month, Apple is set to release a new iPhone featuring a larger "
    "screen and an improved camera."
)

BASIC_SUMMARY_PROMPT = "Summarize: {{input}}"

CLEAR_INSTRUCTIONS_PROMPT = """Summarize the text below in a single sentence of at most 20 words.
Keep the company name and the product name. Do not add facts that are not in the text.

Text: {{input}}

Summary:"""

OUTPUT_PRIMING_PROMPT = """Write a one-paragraph product announcement for the news below.
Start with a headline in capital letters, then the paragraph.

News: {{input}}

HEADLINE:"""

SYNTAX_CUES_PROMPT = """Extract the company, the product and the announced features from the text between ### markers.
Answer with one line per field, in this format:
company: <name>
product: <name>
features: <comma separated list>

###
{{input}}
###

company:"""

FEW_SHOT_PROMPT = """Classify the sentiment of each review as Positive, Negative or Neutral.

Review: This film was absolutely brilliant, the acting was superb.
Sentiment: Positive

Review: Terrible waste of time, poor acting and a confusing story.
Sentiment: Negative

Review: The movie was okay. Some good scenes but nothing memorable.
Sentiment: Neutral

Review: {{input}}
Sentiment:"""

FEW_SHOT_REASONING_PROMPT = """Q: The odd numbers in this group add up to an even number: 4, 8, 9, 15, 12, 2, 1.
A: The odd numbers are 9, 15 and 1. Their sum is 25, which is odd. The answer is False.

Q: The odd numbers in this group add up to an even number: 17, 10, 19, 4, 8, 12, 24.
A: The odd numbers are 17 and 19. Their sum is 36, which is even. The answer is True.

Q: The odd numbers in this group add up to an even number: {{input}}.
A:"""

TASK_DECOMPOSITION_PROMPT = """Answer the question by breaking it into lookups first.
Write each lookup on its own line as SEARCH("<query>"), then give the final answer
on a line starting with ANSWER:.

Question: How old was the founder of the company that makes the iPhone when the company was founded?
SEARCH("company that makes the iPhone")
SEARCH("Apple founders")
SEARCH("Steve Jobs date of birth")
SEARCH("Apple founding date")
ANSWER: Steve Jobs was 21 when Apple was founded in April 1976.

Question: {{input}}
"""

OPEN_PROMPT = "Write a haiku about writing clear instructions for a language model."

CHAIN_SUMMARIZE_PROMPT = """Summarize the following text in two sentences:

{{input}}"""

CHAIN_TRANSLATE_PROMPT = """Translate the following text into French. Reply with the translation only.

{{input}}"""


@dataclass(frozen=True)
class Technique:
    key: str
    title: str
    description: str
    template: PromptTemplate
    config: GenerationConfig = field(default_factory=GenerationConfig)
    sample_input: str = ""

    def stage(self) -> Stage:
        return Stage(name=self.key, template=self.template, config=self.config)


_PRECISE = GenerationConfig(max_output_tokens=100, temperature=0.0, top_p=1.0)
_CREATIVE = GenerationConfig(max_output_tokens=300, temperature=0.9, top_p=0.95)
_DEFAULT = GenerationConfig(max_output_tokens=500, temperature=0.7, top_p=0.5)

_CATALOGUE = [
    Technique(
        key="basic_summary",
        title="Unstructured instruction",
        description="A terse instruction, for comparison with the clearer variants.",
        template=PromptTemplate(BASIC_SUMMARY_PROMPT),
        config=_DEFAULT,
        sample_input=APPLE_NEWS,
    ),
    Technique(
        key="clear_instructions",
        title="Clear instructions",
        description="States length, scope and what must not be invented.",
        template=PromptTemplate(CLEAR_INSTRUCTIONS_PROMPT),
        config=_PRECISE,
        sample_input=APPLE_NEWS,
    ),
    Technique(
        key="output_priming",
        title="Output priming",
        description="Ends the prompt with the first token of the expected answer.",
        template=PromptTemplate(OUTPUT_PRIMING_PROMPT),
        config=_CREATIVE,
        sample_input=APPLE_NEWS,
    ),
    Technique(
        key="syntax_cues",
        title="Syntax cues",
        description="Delimiters and a field layout steer the answer format.",
        template=PromptTemplate(SYNTAX_CUES_PROMPT),
        config=_PRECISE,
        sample_input=APPLE_NEWS,
    ),
    Technique(
        key="few_shot",
        title="Few-shot learning",
        description="Labelled examples define the task without describing it.",
        template=PromptTemplate(FEW_SHOT_PROMPT),
        config=GenerationConfig(max_output_tokens=5, temperature=0.0, top_p=1.0),
        sample_input="An incredible masterpiece, the ending left me in tears.",
    ),
    Technique(
        key="few_shot_reasoning",
        title="Few-shot reasoning",
        description="Worked examples show the intermediate steps before the answer.",
        template=PromptTemplate(FEW_SHOT_REASONING_PROMPT),
        config=_PRECISE,
        sample_input="15, 32, 5, 13, 82, 7, 1",
    ),
    Technique(
        key="task_decomposition",
        title="Task decomposition",
        description='Splits a question into SEARCH("...") lookups before answering.',
        template=PromptTemplate(TASK_DECOMPOSITION_PROMPT),
        config=_DEFAULT,
        sample_input="Which country is the headquarters of the maker of the Galaxy phones in?",
    ),
    Technique(
        key="open_prompt",
        title="Prompt without input",
        description="A template with no placeholder; any input is ignored.",
        template=PromptTemplate(OPEN_PROMPT),
        config=_CREATIVE,
    ),
    Technique(
        key="chain_summarize",
        title="Chaining, step 1: summarize",
        description="First stage of the chaining example.",
        template=PromptTemplate(CHAIN_SUMMARIZE_PROMPT),
        config=_DEFAULT,
        sample_input=APPLE_NEWS,
    ),
    Technique(
        key="chain_translate",
        title="Chaining, step 2: translate",
        description="Second stage; consumes the summary produced by step 1.",
        template=PromptTemplate(CHAIN_TRANSLATE_PROMPT),
        config=_DEFAULT,
    ),
]

TECHNIQUES: dict[str, Technique] = {t.key: t for t in _CATALOGUE}

CHAIN_EXAMPLE: tuple[str, ...] = ("chain_summarize", "chain_translate")


def get_technique(key: str) -> Technique:
    try:
        return TECHNIQUES[key]
    except KeyError:
        raise KeyError(
            f"Unknown technique '{key}'. Available: {', '.join(TECHNIQUES)}"
        ) from None


def chain_stages(keys: tuple[str, ...] | list[str] = CHAIN_EXAMPLE) -> list[Stage]:
    return [get_technique(k).stage() for k in keys]
