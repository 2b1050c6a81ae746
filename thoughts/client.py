"""
capy_sim module: thoughts/client.py

Text-generation collaborators. Anything with
    generate(state_tag: str, stats: Stats) -> str
works; calls may block and may raise.
"""

from __future__ import annotations
import json
import random
import urllib.request
from typing import Dict, List, Optional, Protocol

import config
from creature.stats import Stats


class ThoughtClient(Protocol):
    def generate(self, state_tag: str, stats: Stats) -> str:
        ...


def build_prompt(state_tag: str, stats: Stats) -> str:
    return (
        "You are a very relaxed capybara living by a pond. "
        f"Right now you are {state_tag.lower()}. "
        f"Hunger {stats.hunger:.0f}/100 (100 is full), "
        f"chill {stats.chill:.0f}/100, energy {stats.energy:.0f}/100. "
        "Say one short, funny, zen thought in the first person, under 15 words. "
        "No quotes, no emoji."
    )


class GeminiThoughtClient:
    """Thought client for the Gemini generateContent REST endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str = config.GEMINI_MODEL,
        base_url: str = config.GEMINI_URL,
        timeout: float = config.THOUGHT_TIMEOUT_S,
    ) -> None:
        if not api_key:
            raise ValueError("Gemini client needs an API key")
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def generate(self, state_tag: str, stats: Stats) -> str:
        payload = json.dumps({
            "contents": [
                {"role": "user", "parts": [{"text": build_prompt(state_tag, stats)}]},
            ],
            "generationConfig": {"temperature": 0.9, "maxOutputTokens": 60},
        }).encode("utf-8")
        req = urllib.request.Request(
            f"{self._base_url}/{self._model}:generateContent",
            data=payload,
            headers={
                "Content-Type": "application/json",
                "x-goog-api-key": self._api_key,
            },
            method="POST",
        )
        with urllib.request.urlopen(req, timeout=self._timeout) as resp:
            body = json.loads(resp.read().decode("utf-8"))
        return body["candidates"][0]["content"]["parts"][0]["text"].strip()


CANNED_THOUGHTS: Dict[str, List[str]] = {
    "IDLE": ["Nothing to do. Perfect.", "The grass is green. I approve.", "Just vibing."],
    "WALKING": ["Stroll, stroll, stroll.", "Where am I going? Who cares."],
    "SWIMMING": ["The water accepts me as I am.", "Floating is my cardio."],
    "EATING": ["Orange. Life is good.", "Crunch. Bliss.", "A snack a day keeps stress away."],
    "SLEEPING": ["Zzz... dreaming of oranges."],
    "MEDITATING": ["I am the pond. The pond is me.", "Breathe in, breathe out, be capybara."],
}


class CannedThoughtClient:
    """Offline thoughts picked from a fixed table."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def generate(self, state_tag: str, stats: Stats) -> str:
        if stats.hunger < config.STARVING_BELOW:
            return "My tummy is rumbling louder than my inner peace."
        lines = CANNED_THOUGHTS.get(state_tag, CANNED_THOUGHTS["IDLE"])
        return self.rng.choice(lines)
