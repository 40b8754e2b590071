from __future__ import annotations

from typing import List, Sequence, Tuple

from .models import RankedWord, TextStats

RULE = "=" * 50

KEY_OPTIMIZATIONS = (
    "Single pass through the text (the baseline makes four)",
    "Each word is normalized once and counted in place",
    "Bounded min-heap for the top words (O(n log k) instead of repeated scans)",
    "Letters are filtered and counted in the same loop",
    "Bounded min-heap for the longest words instead of a full sort",
)

# (minimum speedup, label) checked from the top down.
STATUS_TIERS: Sequence[Tuple[float, str]] = (
    (100.0, "🥇 Status: Ninja! (100x+ faster)"),
    (50.0, "🥈 Status: Excellent! (50x+ faster)"),
    (10.0, "🥉 Status: Good job! (10x+ faster)"),
)


def render_stats(stats: TextStats, preview_count: int = 3) -> List[str]:
    """Render a TextStats block as console lines."""
    top_preview = stats.top_words[: min(preview_count, len(stats.top_words))]
    longest_preview = stats.longest_words[
        : min(preview_count, len(stats.longest_words))
    ]
    return [
        "Results:",
        f"  Unique words: {stats.word_count}",
        f"  Total chars: {stats.char_count}",
        f"  Top {len(stats.top_words)} words: {_format_ranked(top_preview)}",
        f"  Longest words: {', '.join(longest_preview) or '-'}",
        f"⏱️  Time: {stats.elapsed_ms:.2f} ms",
    ]


def speedup_ratio(baseline: TextStats, optimized: TextStats) -> float | None:
    """Return how many times faster ``optimized`` ran, or None if unmeasurable."""
    if optimized.elapsed_seconds <= 0:
        return None
    return baseline.elapsed_seconds / optimized.elapsed_seconds


def speedup_status(ratio: float) -> str:
    """Map a speedup ratio to its status line."""
    for threshold, label in STATUS_TIERS:
        if ratio >= threshold:
            return label
    return f"📈 Status: Getting there... ({int(ratio)}x faster)"


def render_benchmark(
    text_size: int,
    baseline: TextStats,
    optimized: TextStats,
    preview_count: int = 3,
) -> List[str]:
    """Render the baseline vs optimized comparison report."""
    lines = [
        "📊 Text Analyzer Performance Comparison",
        f"Analyzing {text_size} bytes of text...",
        "",
        "🐌 BASELINE",
        RULE,
        *render_stats(baseline, preview_count),
        "",
        "⚡ OPTIMIZED",
        RULE,
        *render_stats(optimized, preview_count),
        "",
        "🚀 PERFORMANCE IMPROVEMENT",
        RULE,
    ]
    ratio = speedup_ratio(baseline, optimized)
    if ratio is None:
        lines.append("⚡ Too fast to measure accurately!")
    else:
        lines.append(f"Speedup: {ratio:.1f}x faster!")
        lines.append(speedup_status(ratio))
    lines.append("")
    lines.append("📝 KEY OPTIMIZATIONS APPLIED:")
    lines.extend(
        f"  {number}. {item}" for number, item in enumerate(KEY_OPTIMIZATIONS, start=1)
    )
    return lines


def _format_ranked(words: Sequence[RankedWord]) -> str:
    if not words:
        return "-"
    return ", ".join(f"{ranked.word} ({ranked.score})" for ranked in words)
