# scripts/prepare_sms_txt.py
# Write dataset/train.txt and dataset/test.txt in the "<label> <text>" line format
# from the UCI SMS Spam corpus on the Hub (80/20 stratified split).
import argparse, re
from pathlib import Path

from datasets import load_dataset
from sklearn.model_selection import train_test_split

from smsfilter import config

def clean(s):
    return re.sub(r"\s+", " ", (s or "")).strip()

def write_lines(path, labels, texts):
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        for lab, txt in zip(labels, texts):
            f.write(f"{lab}\t{txt}\n")

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--train-out", default=str(config.TRAIN_DATA))
    ap.add_argument("--test-out", default=str(config.TEST_DATA))
    ap.add_argument("--test-size", type=float, default=0.20)
    args = ap.parse_args()

    ds = load_dataset("ucirvine/sms_spam")   # columns: sms, label (0=ham,1=spam)

    texts, labels = [], []
    for split in ("train", "test", "validation"):
        if split not in ds:
            continue
        for r in ds[split]:
            txt = clean(r["sms"])
            if not txt:
                continue
            texts.append(txt)
            labels.append("spam" if int(r["label"]) == 1 else "ham")

    X_tr, X_te, y_tr, y_te = train_test_split(
        texts, labels, test_size=args.test_size, stratify=labels, random_state=config.RANDOM_STATE
    )
    write_lines(Path(args.train_out), y_tr, X_tr)
    write_lines(Path(args.test_out), y_te, X_te)
    print(f"Wrote {len(X_tr)} rows -> {args.train_out}")
    print(f"Wrote {len(X_te)} rows -> {args.test_out}")

if __name__ == "__main__":
    main()
