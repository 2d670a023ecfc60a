"""xAI Grok adapter.

OpenAI-compatible body; thinking-capable models take ``reasoning_effort``
(``low`` or ``high`` only, see the thinking policy).
"""

from __future__ import annotations

from ..base.adapters import OpenAIStyleAdapter, ProviderId
from ..config.defaults import GROK_ENDPOINT
from .models import MODELS


class GrokAdapter(OpenAIStyleAdapter):
    provider_id = ProviderId.GROK
    endpoint = GROK_ENDPOINT
    models = MODELS


__all__ = ["GrokAdapter"]
