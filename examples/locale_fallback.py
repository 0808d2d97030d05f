"""Shipi18n Example - Fallback Reconciliation.

Demonstrates how the client completes sparse translate responses:

1. Languages missing from the response fall back to the source document
2. Regional tags (pt-BR) fall back to their base language (pt)
3. Individual missing keys are filled from base language or source
4. Turning fallbacks off per call

The examples run offline: a canned transport stands in for the service and
returns deliberately incomplete translations. To call the real service,
build the client with Shipi18n(ClientConfig.from_env()) instead.

Python 3.13+.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from shipi18n import ClientConfig, FallbackOptions, Shipi18n
from shipi18n.enums import HttpMethod


class CannedTransport:
    """Transport returning a fixed response for every translate call."""

    def __init__(self, response: Mapping[str, Any]) -> None:
        self.response = response
        self.last_body: Mapping[str, Any] = {}

    def request(
        self,
        endpoint: str,
        body: Mapping[str, Any],
        method: HttpMethod = HttpMethod.POST,
    ) -> Any:
        self.last_body = body
        return json.loads(json.dumps(self.response))

    def close(self) -> None:
        pass


SOURCE = {
    "greeting": "Hello",
    "farewell": "Goodbye",
    "cart": {"title": "Your cart", "empty": "Your cart is empty"},
}

PARTIAL_RESPONSE = {
    "es": {
        "greeting": "Hola",
        "farewell": "Adiós",
        "cart": {"title": "Tu carrito", "empty": "Tu carrito está vacío"},
    },
    "fr": {"greeting": "Bonjour", "cart": {"title": "Votre panier"}},
    "pt": {
        "greeting": "Olá",
        "farewell": "Tchau",
        "cart": {"title": "Seu carrinho", "empty": "Seu carrinho está vazio"},
    },
}


def _client(response: Mapping[str, Any]) -> tuple[Shipi18n, CannedTransport]:
    transport = CannedTransport(response)
    return Shipi18n(ClientConfig(api_key="demo-key"), transport=transport), transport


def example_1_default_fallbacks() -> None:
    """Example 1: Source and regional fallback with default options."""
    print("=" * 60)
    print("Example 1: Default Fallbacks")
    print("=" * 60)

    client, transport = _client(PARTIAL_RESPONSE)
    result = client.translate_json(SOURCE, "en", ["es", "fr", "de", "pt-BR"])

    print(f"\nRequested from service: {transport.last_body['targetLanguages']}")
    for language in ("es", "fr", "de", "pt-BR"):
        print(f"  {language}: {result[language]['greeting']} / {result[language]['farewell']}")

    report = result.fallback
    if report is not None:
        print(f"\nLanguages filled from source: {list(report.languages_fallback_to_source)}")
        print(f"Regional fallbacks: {dict(report.regional_fallbacks)}")
        for language, keys in report.keys_fallback.items():
            print(f"Keys filled in {language}: {list(keys)}")


def example_2_regional_keys() -> None:
    """Example 2: A regional translation missing keys takes them from its base."""
    print("\n" + "=" * 60)
    print("Example 2: Regional Key Fallback (pt-BR -> pt)")
    print("=" * 60)

    response = dict(PARTIAL_RESPONSE)
    response["pt-BR"] = {"greeting": "Oi", "cart": {"title": "Seu carrinho"}}
    client, _ = _client(response)
    result = client.translate_json(SOURCE, "en", ["pt-BR"])

    print(f"\n  greeting:   {result['pt-BR']['greeting']}  (regional)")
    print(f"  farewell:   {result['pt-BR']['farewell']}  (from pt)")
    print(f"  cart.empty: {result['pt-BR']['cart']['empty']}  (from pt)")


def example_3_disabled() -> None:
    """Example 3: Fallbacks switched off leave gaps visible."""
    print("\n" + "=" * 60)
    print("Example 3: Fallbacks Disabled")
    print("=" * 60)

    client, _ = _client(PARTIAL_RESPONSE)
    options = FallbackOptions(fallback_to_source=False, regional_fallback=False)
    result = client.translate_json(SOURCE, "en", ["fr", "de"], fallback=options)

    print(f"\n  fr: {result['fr']}")
    print(f"  de present: {'de' in result}")
    print(f"  fallback report: {result.fallback}")


if __name__ == "__main__":
    example_1_default_fallbacks()
    example_2_regional_keys()
    example_3_disabled()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
