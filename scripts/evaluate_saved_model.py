#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Evaluate a saved CountVectorizer + MultinomialNB pipeline on a raw SMS file.
- Loads the joblib model artifact
- Reads "<label> <text>" lines (through the Parquet cache when --cache is given)
- Saves metrics_eval.json, report.txt and the confusion matrix figure

Usage examples:
  python scripts/evaluate_saved_model.py \
    --data dataset/test.txt \
    --model models/sms.joblib \
    --outdir outputs/sms_eval
"""

import argparse, json, logging
from pathlib import Path

from smsfilter import config
from smsfilter.data import load_cached, load_raw
from smsfilter.errors import PipelineError
from smsfilter.evaluate import evaluate
from smsfilter.plots import plot_confusion
from smsfilter.store import load_model

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--data", default=str(config.TEST_DATA), help="Raw '<label> <text>' file")
    ap.add_argument("--cache", default=None, help="Parquet cache for --data")
    ap.add_argument("--model", default=str(config.MODEL_FILE), help="Path to the joblib model")
    ap.add_argument("--outdir", required=True, help="Directory to write evaluation artifacts")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format=config.LOG_FORMAT)
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    try:
        pipe = load_model(args.model)
        data = load_cached(args.data, args.cache) if args.cache else load_raw(args.data)
        result = evaluate(pipe, data)
    except PipelineError as e:
        raise SystemExit(str(e))

    plot_confusion(result, outdir / "eval_cm.png", title="eval Confusion Matrix")
    metrics = result.to_dict()
    Path(outdir, "metrics_eval.json").write_text(json.dumps(metrics, indent=2), encoding="utf-8")
    Path(outdir, "report.txt").write_text(result.report(), encoding="utf-8")

    print("\n=== EVALUATION DONE ===")
    print(result.report())
    print(f"\nArtifacts written to: {outdir.resolve()}")

if __name__ == "__main__":
    main()
