"""Together AI alias table (USD per million tokens).

Hosted open-weight models; aliases are short forms of the repository ids.
"""

from ..base.models import model_table

MODELS = model_table(
    [
        (("qw3-235b-think",), "Qwen/Qwen3-235B-A22B-Thinking-2507", 0.65, 3),
        (("qw3-480b",), "Qwen/Qwen3-Coder-480B-A35B-Instruct-FP8", 2, 2),
        (("qw3-235b-tput",), "Qwen/Qwen3-235B-A22B-Instruct-2507-tput", 0.2, 0.6),
        (("qw2.5-vl-72b",), "Qwen/Qwen2.5-VL-72B-Instruct", 1.95, 8),
        (("qwq-32b",), "Qwen/QwQ-32B", 1.2, 1.2),
        (("llam4-mav",), "meta-llama/Llama-4-Maverick-17B-128E-Instruct-FP8", 0.27, 0.85),
        (("llam4-sc",), "meta-llama/Llama-4-Scout-17B-16E-Instruct", 0.18, 0.59),
        (("llam3.3-70b-t",), "meta-llama/Llama-3.3-70B-Instruct-Turbo", 0.88, 0.88),
        (("mx-8x7b",), "mistralai/Mixtral-8x7B-Instruct-v0.1", 0.6, 0.6),
        (("ms-7b",), "mistralai/Mistral-7B-Instruct-v0.1", 0.2, 0.2),
        (("ms-24b",), "mistralai/Mistral-Small-24B-Instruct-2501", 0.8, 0.8),
        (("ds-r1",), "deepseek-ai/DeepSeek-R1", 3, 7),
        (("ds-v3",), "deepseek-ai/DeepSeek-V3", 1.25, 1.25),
        (("ds-r1-tput",), "deepseek-ai/DeepSeek-R1-0528-tput", 0.55, 2.19),
        (("ds-r1-dis-llam",), "deepseek-ai/DeepSeek-R1-Distill-Llama-70B", 2, 2),
        (("ds-r1-dis-qw",), "deepseek-ai/DeepSeek-R1-Distill-Qwen-14B", 1.6, 1.6),
        (("gemma-3n-4b",), "google/gemma-3n-E4B-it", 0.02, 0.04),
        (("oai-gpt-20b",), "openai/gpt-oss-20b", 0.05, 0.2),
        (("oai-gpt-120b",), "openai/gpt-oss-120b", 0.15, 0.6),
        (("kimi-k2",), "moonshotai/Kimi-K2-Instruct", 1, 3),
        (("glm-4.5-air",), "zai-org/GLM-4.5-Air-FP8", 0.2, 1.1),
        # free tier
        (("exa-3.5-32b",), "lgai/exaone-3-5-32b-instruct", 0, 0),
        (("exa-deep-32b",), "lgai/exaone-deep-32b", 0, 0),
        (("rf-small",), "togethercomputer/Refuel-Llm-V2-Small", 0.2, 0.2),
        (("cog-v2-70b",), "deepcogito/cogito-v2-preview-llama-70B", 0.88, 0.88),
        (("llam3.1-8b-t",), "meta-llama/Meta-Llama-3.1-8B-Instruct-Turbo", 0.18, 0.18),
        (("qw2.5-7b-t",), "Qwen/Qwen2.5-7B-Instruct-Turbo", 0.3, 0.3),
        (("qw2.5-72b-t",), "Qwen/Qwen2.5-72B-Instruct-Turbo", 1.2, 1.2),
        (("qw2.5-coder-32b",), "Qwen/Qwen2.5-Coder-32B-Instruct", 1.2, 1.2),
        (("qw3-235b-tput-fp8",), "Qwen/Qwen3-235B-A22B-fp8-tput", 0.2, 0.6),
        (("arcee-coder-l",), "arcee-ai/coder-large", 0.5, 0.8),
        (("arcee-maestro",), "arcee-ai/maestro-reasoning", 0.9, 3.3),
        (("llam3.1-405b-t",), "meta-llama/Meta-Llama-3.1-405B-Instruct-Turbo", 3.5, 3.5),
        (("llam3.2-3b-t",), "meta-llama/Llama-3.2-3B-Instruct-Turbo", 0.06, 0.06),
    ]
)

__all__ = ["MODELS"]
