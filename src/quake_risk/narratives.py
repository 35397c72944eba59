"""Bilingual (English/Japanese) narrative tables.

Every user-facing sentence the scorer emits lives here as a static template
keyed by locale and category. Nothing in this module makes a risk decision;
callers pass the category they already computed.
"""

from __future__ import annotations

from quake_risk.models import RiskLevel
from quake_risk.validation import InvalidInputError

DEFAULT_LOCALE = "en"
LOCALES = ("en", "ja")

# ── Factor and summary titles ─────────────────────────────────────────────

_TITLES: dict[str, dict[str, str]] = {
    "en": {
        "depth": "Depth Analysis",
        "time": "Time Analysis",
        "magnitude": "Magnitude Analysis",
        "combined": "Overall Risk Assessment",
    },
    "ja": {
        "depth": "深度分析",
        "time": "時間分析",
        "magnitude": "マグニチュード分析",
        "combined": "総合リスク評価",
    },
}

# ── Per-factor analysis templates ─────────────────────────────────────────

_DEPTH_ANALYSIS: dict[str, dict[RiskLevel, str]] = {
    "en": {
        RiskLevel.HIGH: "Shallow depth of {value}km can cause significant surface impact",
        RiskLevel.MEDIUM: "Moderate depth of {value}km may cause noticeable shaking",
        RiskLevel.LOW: "Deep depth of {value}km reduces surface impact",
    },
    "ja": {
        RiskLevel.HIGH: "{value}km の浅い深度は地表に大きな影響を与える可能性があります",
        RiskLevel.MEDIUM: "{value}km の中程度の深度で体感できる揺れが予想されます",
        RiskLevel.LOW: "{value}km の深い深度により地表への影響は軽減されます",
    },
}

# Time narratives depend on the recency band, not only the category:
# "medium" covers both recent activity and long quiescence.
_TIME_ANALYSIS: dict[str, dict[str, str]] = {
    "en": {
        "recent": "Recent earthquake activity ({value} days ago) indicates ongoing stress",
        "active": "Recent earthquake activity ({value} days ago) has been detected",
        "dormant": "Long quiet period ({value} days) may indicate energy buildup",
        "normal": "{value} days since last earthquake - normal interval",
    },
    "ja": {
        "recent": "最近の地震活動（{value}日前）は継続的なストレスを示しています",
        "active": "最近の地震活動（{value}日前）が検出されています",
        "dormant": "長期間の静穏期（{value}日）はエネルギー蓄積の可能性があります",
        "normal": "最後の地震から{value}日経過 - 正常な間隔です",
    },
}

_MAGNITUDE_ANALYSIS: dict[str, dict[RiskLevel, str]] = {
    "en": {
        RiskLevel.HIGH: "Magnitude {value} indicates potential for severe damage",
        RiskLevel.MEDIUM: "Magnitude {value} may cause noticeable effects",
        RiskLevel.LOW: "Magnitude {value} represents minor impact level",
    },
    "ja": {
        RiskLevel.HIGH: "マグニチュード {value} は深刻な被害の可能性を示します",
        RiskLevel.MEDIUM: "マグニチュード {value} で体感できる影響が予想されます",
        RiskLevel.LOW: "マグニチュード {value} は軽微な影響レベルです",
    },
}

_COMBINED_ANALYSIS: dict[str, dict[RiskLevel, str]] = {
    "en": {
        RiskLevel.HIGH: "Combined score {value} - Multiple high-risk factors detected",
        RiskLevel.MEDIUM: "Combined score {value} - Moderate risk level identified",
        RiskLevel.LOW: "Combined score {value} - Current conditions show low risk",
    },
    "ja": {
        RiskLevel.HIGH: "総合スコア {value} - 複数の高リスク要因が検出されました",
        RiskLevel.MEDIUM: "総合スコア {value} - 中程度のリスクレベルです",
        RiskLevel.LOW: "総合スコア {value} - 現在の条件は低リスクを示しています",
    },
}

# ── Recommendations ───────────────────────────────────────────────────────

_DEPTH_RECOMMENDATION: dict[str, dict[RiskLevel, str]] = {
    "en": {
        RiskLevel.HIGH: "Secure heavy objects immediately",
        RiskLevel.MEDIUM: "Review structural safety and emergency plans",
        RiskLevel.LOW: "Continue standard earthquake preparedness",
    },
    "ja": {
        RiskLevel.HIGH: "重い物体を直ちに固定してください",
        RiskLevel.MEDIUM: "構造安全性と緊急計画を確認してください",
        RiskLevel.LOW: "標準的な地震対策を継続してください",
    },
}

_TIME_RECOMMENDATION: dict[str, dict[str, str]] = {
    "en": {
        "recent": "Stay alert and prepare for potential aftershocks",
        "active": "Pay attention to recent regional activity",
        "dormant": "Consider increasing preparedness level",
        "normal": "Maintain routine preparedness",
    },
    "ja": {
        "recent": "警戒を継続し、余震に備えてください",
        "active": "最近の地域活動に注意を払ってください",
        "dormant": "準備レベルを強化することを検討してください",
        "normal": "日常的な準備を維持してください",
    },
}

_MAGNITUDE_RECOMMENDATION: dict[str, dict[RiskLevel, str]] = {
    "en": {
        RiskLevel.HIGH: "Check building safety and prepare evacuation plans",
        RiskLevel.MEDIUM: "Secure loose items and check emergency supplies",
        RiskLevel.LOW: "Maintain basic earthquake preparedness",
    },
    "ja": {
        RiskLevel.HIGH: "建物の安全性を確認し、避難計画を準備してください",
        RiskLevel.MEDIUM: "緩い物を固定し、緊急用品を確認してください",
        RiskLevel.LOW: "基本的な地震対策を維持してください",
    },
}

_COMBINED_RECOMMENDATION: dict[str, dict[RiskLevel, str]] = {
    "en": {
        RiskLevel.HIGH: "IMMEDIATE ACTION REQUIRED - Implement all safety measures",
        RiskLevel.MEDIUM: "CAUTION REQUIRED - Review and update emergency preparations",
        RiskLevel.LOW: "MAINTAIN BASIC AWARENESS",
    },
    "ja": {
        RiskLevel.HIGH: "即座の行動が必要です - すべての安全対策を実施してください",
        RiskLevel.MEDIUM: "注意が必要です - 緊急準備を確認・更新してください",
        RiskLevel.LOW: "基本的な注意を維持してください",
    },
}

# ── Nearest-reference refinement sentences ────────────────────────────────

_REFINEMENT: dict[str, dict[str, str]] = {
    "en": {
        "nearest": "Nearest reference city: {name} ({distance:.1f}km away).",
        "city_category": "City risk category: {category}.",
        "depth_shallow": "Shallow depth increases surface impact risk.",
        "depth_moderate": "Moderate depth with significant surface impact potential.",
        "depth_deep": "Deep earthquake with reduced surface impact.",
        "magnitude_high": "High magnitude indicates potential for severe damage.",
        "magnitude_moderate": "Moderate magnitude with noticeable effects.",
        "magnitude_low": "Low magnitude with minimal effects.",
        "time_recent": "Recent seismic activity indicates ongoing geological stress.",
        "time_active": "Recent earthquake activity in the region.",
        "time_dormant": "Extended quiet period may indicate accumulated stress.",
        "no_reference": "No reference city available for comparison.",
    },
    "ja": {
        "nearest": "最寄りの参照都市: {name}（{distance:.1f}km）。",
        "city_category": "都市のリスクカテゴリ: {category}。",
        "depth_shallow": "浅い深度により地表への影響リスクが高まります。",
        "depth_moderate": "中程度の深度で地表への大きな影響の可能性があります。",
        "depth_deep": "深い地震のため地表への影響は軽減されます。",
        "magnitude_high": "高いマグニチュードは深刻な被害の可能性を示します。",
        "magnitude_moderate": "中程度のマグニチュードで体感できる影響があります。",
        "magnitude_low": "低いマグニチュードで影響は最小限です。",
        "time_recent": "最近の地震活動は継続的な地質ストレスを示しています。",
        "time_active": "地域で最近の地震活動があります。",
        "time_dormant": "長期の静穏期は蓄積されたストレスを示す可能性があります。",
        "no_reference": "比較可能な参照都市がありません。",
    },
}

# ── Category names and validation messages ────────────────────────────────

TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        "low": "Low Risk",
        "medium": "Medium Risk",
        "high": "High Risk",
        "invalidInput": "Invalid Input",
        "enterValidValues": "Please enter valid numeric values for all fields",
        "locationError": "Location Error",
        "enterJapanCoords": "Please enter coordinates within Japan's boundaries",
        "rangeError": "Range Error",
        "valuesOutOfRange": "Input values are outside valid range",
        "unknownLocale": "Unsupported language",
    },
    "ja": {
        "low": "低リスク",
        "medium": "中リスク",
        "high": "高リスク",
        "invalidInput": "入力エラー",
        "enterValidValues": "すべての項目に有効な数値を入力してください",
        "locationError": "位置エラー",
        "enterJapanCoords": "日本国内の座標を入力してください",
        "rangeError": "範囲エラー",
        "valuesOutOfRange": "入力値が有効範囲外です",
        "unknownLocale": "サポートされていない言語です",
    },
}


def check_locale(locale: str) -> str:
    """Return ``locale`` if supported, else raise InvalidInputError."""
    if locale not in LOCALES:
        raise InvalidInputError(
            f"Unknown locale '{locale}'. Choose from: {list(LOCALES)}",
            key="unknownLocale",
        )
    return locale


def format_value(value: float) -> str:
    """Render a number the way the form displays it (15.0 -> '15')."""
    return f"{value:g}"


def translate(key: str, locale: str = DEFAULT_LOCALE) -> str:
    """Look up a UI string; unknown keys fall back to the key itself."""
    return TRANSLATIONS[check_locale(locale)].get(key, key)


def title(factor: str, locale: str = DEFAULT_LOCALE) -> str:
    return _TITLES[check_locale(locale)][factor]


def depth_analysis(depth_km: float, level: RiskLevel, locale: str = DEFAULT_LOCALE) -> str:
    return _DEPTH_ANALYSIS[check_locale(locale)][level].format(value=format_value(depth_km))


def depth_recommendation(level: RiskLevel, locale: str = DEFAULT_LOCALE) -> str:
    return _DEPTH_RECOMMENDATION[check_locale(locale)][level]


def time_analysis(days: int, band: str, locale: str = DEFAULT_LOCALE) -> str:
    return _TIME_ANALYSIS[check_locale(locale)][band].format(value=days)


def time_recommendation(band: str, locale: str = DEFAULT_LOCALE) -> str:
    return _TIME_RECOMMENDATION[check_locale(locale)][band]


def magnitude_analysis(magnitude: float, level: RiskLevel, locale: str = DEFAULT_LOCALE) -> str:
    return _MAGNITUDE_ANALYSIS[check_locale(locale)][level].format(value=format_value(magnitude))


def magnitude_recommendation(level: RiskLevel, locale: str = DEFAULT_LOCALE) -> str:
    return _MAGNITUDE_RECOMMENDATION[check_locale(locale)][level]


def combined_analysis(score: float, level: RiskLevel, locale: str = DEFAULT_LOCALE) -> str:
    return _COMBINED_ANALYSIS[check_locale(locale)][level].format(value=f"{score:.1f}")


def combined_recommendation(level: RiskLevel, locale: str = DEFAULT_LOCALE) -> str:
    return _COMBINED_RECOMMENDATION[check_locale(locale)][level]


def refinement_sentence(key: str, locale: str = DEFAULT_LOCALE, **params) -> str:
    return _REFINEMENT[check_locale(locale)][key].format(**params)
