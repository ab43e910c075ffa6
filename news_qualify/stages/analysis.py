"""Per-domain summary of the published dataset."""

import pandas as pd

SUMMARY_COLUMNS = [
    "Domain",
    "Total number of articles",
    "Does the domain have any paywalled contents?",
    "Number of paywalled articles",
    "percentage of complete articles without paywalls",
]


def summarize_domains(final: pd.DataFrame) -> pd.DataFrame:
    """Aggregate article and paywall counts per domain.

    Domains appear in order of first appearance. Only domains with at
    least one article exist, so the percentage never divides by zero.

    Args:
        final: Normalized dataset (paywall already 1/0)

    Returns:
        DataFrame with the display columns in SUMMARY_COLUMNS
    """
    if final.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    grouped = final.groupby("domain", sort=False, dropna=False)
    summary = pd.DataFrame({
        "total_articles": grouped.size(),
        "paywalled_articles": grouped["paywall"].sum(),
    }).reset_index()

    summary["has_paywalled_content"] = summary["paywalled_articles"].map(lambda n: "Yes" if n > 0 else "No")
    pct_free = (summary["total_articles"] - summary["paywalled_articles"]) / summary["total_articles"] * 100
    summary["percentage_without_paywall"] = pct_free.map(lambda p: f"{p:.2f}%")

    summary = summary.rename(columns={
        "domain": "Domain",
        "total_articles": "Total number of articles",
        "has_paywalled_content": "Does the domain have any paywalled contents?",
        "paywalled_articles": "Number of paywalled articles",
        "percentage_without_paywall": "percentage of complete articles without paywalls",
    })
    return summary[SUMMARY_COLUMNS]


def format_summary(summary: pd.DataFrame) -> str:
    """Render the summary table for the console."""
    if summary.empty:
        return "(no articles in the final dataset)"
    return summary.to_string(index=False)
