"""
Narrative biography generation through the Gemini API (google-genai).

``generate_biography`` always returns display text: a missing API key, an
empty answer or a failed request each map to a fixed Portuguese message.
"""

from __future__ import annotations

import os
from typing import Any, Optional

from google import genai

from gedcom_viewer.config import get_config
from gedcom_viewer.logging import get_logger
from gedcom_viewer.registry.entities import Person

log = get_logger(__name__)

MISSING_KEY_MESSAGE = (
    "Chave da API Gemini não configurada. "
    "Adicione a API KEY para gerar biografias automáticas."
)
EMPTY_RESPONSE_MESSAGE = "Não foi possível gerar a biografia."
REQUEST_FAILED_MESSAGE = "Erro ao conectar com o Gemini para gerar a biografia."

UNKNOWN = "Desconhecido"


def build_biography_prompt(person: Person) -> str:
    birth_date = person.birth.date if person.birth and person.birth.date else UNKNOWN
    birth_place = person.birth.place if person.birth and person.birth.place else UNKNOWN
    death_date = person.death.date if person.death and person.death.date else "Vivo/Desconhecido"
    death_place = person.death.place if person.death and person.death.place else UNKNOWN

    return (
        "Atue como um genealogista profissional. Escreva uma breve biografia "
        "narrativa (máximo 100 palavras) em Português para a seguinte pessoa "
        "baseada nos dados do GEDCOM:\n"
        f"Nome: {person.display_name}\n"
        f"Sexo: {person.sex.value}\n"
        f"Nascimento: {birth_date} em {birth_place}\n"
        f"Falecimento: {death_date} em {death_place}\n"
        "\n"
        "Se os dados forem escassos, escreva algo poético sobre a importância "
        "da memória familiar."
    )


def _resolve_api_key(api_key: Optional[str]) -> Optional[str]:
    if api_key:
        return api_key
    env_name = get_config().biography.get("api_key_env", "API_KEY")
    return os.environ.get(env_name) or None


def generate_biography(
    person: Person,
    *,
    client: Any = None,
    api_key: Optional[str] = None,
    model: Optional[str] = None,
) -> str:
    """
    Ask Gemini for a short biography of ``person``.

    ``client`` may be any object exposing ``models.generate_content``; when
    omitted one is created from the configured API key.
    """
    model_name = model or get_config().biography.get("model", "gemini-2.5-flash")

    key = None
    if client is None:
        key = _resolve_api_key(api_key)
        if not key:
            log.warning("Biography requested for %s without an API key", person.id)
            return MISSING_KEY_MESSAGE

    prompt = build_biography_prompt(person)

    try:
        if client is None:
            client = genai.Client(api_key=key)
        response = client.models.generate_content(model=model_name, contents=prompt)
    except Exception as exc:
        log.error("Gemini biography request failed for %s: %s", person.id, exc)
        return REQUEST_FAILED_MESSAGE

    text = getattr(response, "text", None)
    if not text or not text.strip():
        log.warning("Gemini returned an empty biography for %s", person.id)
        return EMPTY_RESPONSE_MESSAGE

    return text.strip()
