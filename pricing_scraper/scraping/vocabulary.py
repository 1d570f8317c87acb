"""
Static pricing vocabulary and currency patterns used by discovery and extraction.

Tables are keyed by language so new locales can be added without touching
the matching code. Iteration order is significant: language order first,
then keyword order inside each language.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping

PRICING_KEYWORDS: dict[str, tuple[str, ...]] = {
    "en": (
        "pricing",
        "price",
        "plans",
        "plan",
        "subscription",
        "subscribe",
        "billing",
        "billed",
        "per month",
        "per year",
        "monthly",
        "yearly",
        "annually",
        "free trial",
        "upgrade",
    ),
    "es": ("precios", "precio", "planes", "suscripción", "mensual", "anual", "facturación"),
    "fr": ("tarifs", "tarif", "prix", "abonnement", "forfait", "mensuel", "annuel", "facturation"),
    "de": ("preise", "preis", "tarife", "abonnement", "monatlich", "jährlich", "abrechnung"),
    "it": ("prezzi", "prezzo", "piani", "abbonamento", "mensile", "annuale"),
    "pt": ("preços", "preço", "planos", "assinatura", "mensal", "anual"),
    "nl": ("prijzen", "prijs", "abonnement", "maandelijks", "jaarlijks"),
    "ja": ("料金", "価格", "プラン", "月額", "年額"),
    "zh": ("价格", "價格", "定价", "套餐", "订阅", "月付", "年付"),
    "ko": ("요금", "가격", "요금제", "구독"),
    "ru": ("цены", "цена", "тарифы", "тариф", "подписка"),
}

PLAN_NAME_KEYWORDS: dict[str, tuple[str, ...]] = {
    "en": (
        "basic",
        "pro",
        "premium",
        "enterprise",
        "starter",
        "advanced",
        "professional",
        "business",
        "personal",
        "team",
        "individual",
        "standard",
        "growth",
        "ultimate",
        "free",
    ),
    "es": ("básico", "profesional", "empresarial", "gratis", "gratuito"),
    "fr": ("essentiel", "entreprise", "gratuit"),
    "de": ("kostenlos", "unternehmen"),
    "it": ("gratuito", "aziendale"),
    "pt": ("básico", "empresarial", "grátis"),
    "ja": ("ベーシック", "スタンダード", "ビジネス", "エンタープライズ", "無料"),
    "zh": ("基础版", "专业版", "企业版", "高级版", "免费版"),
    "ko": ("베이직", "비즈니스", "엔터프라이즈", "무료"),
    "ru": ("базовый", "профессиональный", "бизнес", "корпоративный", "бесплатный"),
}

CADENCE_KEYWORDS: dict[str, dict[str, tuple[str, ...]]] = {
    "Monthly": {
        "en": ("monthly", "per month", "a month", "/month", "/mo", "month"),
        "es": ("mensual", "al mes", "/mes"),
        "fr": ("mensuel", "par mois", "/mois"),
        "de": ("monatlich", "pro monat", "/monat"),
        "it": ("mensile", "al mese"),
        "pt": ("mensal", "por mês", "/mês"),
        "nl": ("maandelijks", "per maand"),
        "ja": ("月額",),
        "zh": ("月付", "每月"),
        "ko": ("월간",),
        "ru": ("в месяц", "ежемесячно", "/мес"),
    },
    "Yearly": {
        "en": ("yearly", "annually", "annual", "per year", "a year", "/year", "/yr", "year"),
        "es": ("anual", "al año"),
        "fr": ("annuel", "par an"),
        "de": ("jährlich", "pro jahr"),
        "it": ("annuale", "all'anno"),
        "pt": ("anual", "por ano"),
        "nl": ("jaarlijks", "per jaar"),
        "ja": ("年額",),
        "zh": ("年付", "每年"),
        "ko": ("연간",),
        "ru": ("в год", "ежегодно"),
    },
    "Weekly": {
        "en": ("weekly", "per week", "/week", "/wk"),
        "es": ("semanal",),
        "fr": ("hebdomadaire",),
        "de": ("wöchentlich",),
    },
    "One-time": {
        "en": ("one-time", "one time", "lifetime", "pay once"),
        "es": ("pago único",),
        "fr": ("paiement unique",),
        "de": ("einmalig",),
        "pt": ("pagamento único",),
    },
}

PRICING_URL_HINTS: tuple[str, ...] = (
    "pricing",
    "price",
    "plan",
    "subscription",
    "billing",
    "premium",
    "enterprise",
    "upgrade",
    "tarif",
    "preise",
    "precios",
    "prezzi",
    "precos",
    "preços",
    "prijzen",
    "料金",
    "价格",
    "цены",
)

PRICING_PATHS: tuple[str, ...] = (
    "/pricing",
    "/plans",
    "/price",
    "/prices",
    "/pricing-plans",
    "/subscription",
    "/subscribe",
    "/billing",
    "/premium",
    "/upgrade",
    "/preise",
    "/tarife",
    "/tarifs",
    "/prix",
    "/precios",
    "/planes",
    "/prezzi",
    "/piani",
    "/precos",
    "/planos",
    "/prijzen",
    "/料金",
    "/价格",
    "/цены",
)

FEATURE_BULLETS: tuple[str, ...] = ("•", "✓", "✔", "→", "▶", "▪", "▫")

_AMOUNT = r"(?:\d{1,3}(?:[,.\u00a0\u202f]\d{3})+(?:[.,]\d{1,2})?|\d+(?:[.,]\d{1,2})?)"
_SYMBOLS = r"(?:US\$|C\$|A\$|NZ\$|HK\$|R\$|[$€£¥₹₩₽₺₪₫฿₱])"
_CODES = r"(?:USD|EUR|GBP|JPY|CNY|RMB|INR|KRW|RUB|CHF|CAD|AUD|NZD|BRL|MXN|SEK|NOK|DKK|PLN|ZAR|SGD|HKD)"
_NAMED = (
    r"(?:dollars?|euros?|pounds?|yen|yuan|rupees?|reais|francs?|kronor|kroner|"
    r"złotych|zł|рублей|руб\.?|円|元|원)"
)
_PERIODS = r"(?:month|mo|year|yr|annum|week|wk|user|seat|mes|mois|monat|mese|mês|月|年)"

# Ordered: the first pattern that matches a candidate wins.
PRICE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"{_SYMBOLS}\s?{_AMOUNT}"),
    re.compile(rf"{_AMOUNT}\s?[€£¥₹₩₽₺₪₫฿₱]"),
    re.compile(rf"{_AMOUNT}\s?{_CODES}\b"),
    re.compile(rf"\b{_CODES}\s?{_AMOUNT}"),
    re.compile(rf"{_AMOUNT}\s?{_NAMED}", flags=re.IGNORECASE),
    re.compile(rf"{_AMOUNT}\s?(?:/|per\s|a\s|par\s|pro\s)\s?{_PERIODS}(?![a-z])", flags=re.IGNORECASE),
)


def iter_keywords(table: Mapping[str, tuple[str, ...]]) -> Iterator[str]:
    """
    Yield keywords in language order, then keyword order.
    """

    for keywords in table.values():
        yield from keywords


def iter_cadence_terms() -> Iterator[tuple[str, str]]:
    """
    Yield `(label, term)` pairs in label, language, term order.
    """

    for label, by_language in CADENCE_KEYWORDS.items():
        for term in iter_keywords(by_language):
            yield label, term


ALL_PRICING_KEYWORDS: tuple[str, ...] = tuple(dict.fromkeys(iter_keywords(PRICING_KEYWORDS)))
