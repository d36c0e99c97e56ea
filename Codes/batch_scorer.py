# batch_scorer.py

from pathlib import Path

import pandas as pd

from sentiment_scorer import (
    NEGATIVE, NEUTRAL, POSITIVE,
    resolve_options, score_with_lexicon, score_with_valence_table,
)

TEXT_COL = "text"
LABELS = [POSITIVE, NEUTRAL, NEGATIVE]


def load_texts(path: Path) -> pd.DataFrame:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path.resolve()}")

    suffix = path.suffix.lower()
    if suffix in [".pkl", ".pickle"]:
        return pd.read_pickle(path)
    if suffix in [".xlsx", ".xls"]:
        return pd.read_excel(path)
    if suffix == ".csv":
        return pd.read_csv(path)
    raise ValueError(f"Unsupported data extension: {suffix}")


def score_dataframe(df: pd.DataFrame, text_col=TEXT_COL, options=None) -> pd.DataFrame:
    """
    Score every row with both strategies and return a copy with
    rule_score / rule_label / valence_score / valence_label / labels_agree.

    Missing (NaN) texts score like empty input.
    """
    if text_col not in df.columns:
        raise KeyError(f"Text column '{text_col}' not in data (have: {list(df.columns)})")

    opts = resolve_options(options)
    out = df.copy()

    rule = out[text_col].apply(lambda t: score_with_lexicon(t, opts))
    valence = out[text_col].apply(lambda t: score_with_valence_table(t, opts))

    out["rule_score"] = rule.apply(lambda r: r.score).astype(int)
    out["rule_label"] = rule.apply(lambda r: r.label)
    out["valence_score"] = valence.apply(lambda r: r.score).astype(int)
    out["valence_label"] = valence.apply(lambda r: r.label)
    out["labels_agree"] = out["rule_label"] == out["valence_label"]
    return out


def summarize_agreement(scored: pd.DataFrame):

    # Label counts per strategy plus how often the two strategies agree.
    total = len(scored)
    rule_counts = scored["rule_label"].value_counts()
    valence_counts = scored["valence_label"].value_counts()

    return {
        "total": total,
        "rule": {label: int(rule_counts.get(label, 0)) for label in LABELS},
        "valence": {label: int(valence_counts.get(label, 0)) for label in LABELS},
        "agreement_rate": float(scored["labels_agree"].mean()) if total else 0.0,
    }


def run_batch(input_path: Path, out_dir: Path, text_col=TEXT_COL, options=None):
    print(f"Loading texts from {Path(input_path).resolve()} ...")
    df = load_texts(input_path)
    print(f"Loaded {len(df)} rows")

    scored = score_dataframe(df, text_col=text_col, options=options)

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / f"{Path(input_path).stem}_scored.csv"
    scored.to_csv(out_path, index=False)
    print(f"Saved scored data to {out_path.resolve()}")

    summary = summarize_agreement(scored)
    print("\n=== Strategy comparison ===")
    for name in ("rule", "valence"):
        counts = summary[name]
        print(
            f"{name:<8} "
            f"Positive={counts[POSITIVE]:>5}  "
            f"Neutral={counts[NEUTRAL]:>5}  "
            f"Negative={counts[NEGATIVE]:>5}"
        )
    print(f"Agreement rate: {summary['agreement_rate']:.3f} over {summary['total']} rows")
    return scored, summary
