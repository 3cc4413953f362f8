# smsfilter/cli.py
# Usage:
#   smsfilter                       # load models/sms.joblib or train it, then demo + evaluate
#   smsfilter --retrain --metrics-json outputs/metrics.json --plot outputs/confusion_matrix.png
#   smsfilter --message "WINNER!! claim your prize now"

import argparse, json, logging
from pathlib import Path

from . import config
from .pipeline import SpamPipeline

logger = logging.getLogger(__name__)


def build_parser():
    ap = argparse.ArgumentParser(prog="smsfilter",
                                 description="Multinomial Naive Bayes SMS spam classifier")
    ap.add_argument("--train", default=str(config.TRAIN_DATA), help="Raw training file")
    ap.add_argument("--train-cache", default=str(config.TRAIN_CACHE))
    ap.add_argument("--test", default=str(config.TEST_DATA), help="Raw evaluation file")
    ap.add_argument("--test-cache", default=str(config.TEST_CACHE))
    ap.add_argument("--model", default=str(config.MODEL_FILE), help="Model artifact path")
    ap.add_argument("--message", default=config.DEMO_MESSAGE, help="Message to classify")
    ap.add_argument("--retrain", action="store_true", help="Ignore an existing model artifact")
    ap.add_argument("--metrics-json", default=None, help="Also write evaluation metrics here")
    ap.add_argument("--plot", default=None, help="Also write a confusion matrix PNG here")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def prepare_model(pipe, args):
    """Load the stored model, or train and store a new one."""
    model_path = Path(args.model)
    if not args.retrain and model_path.exists():
        if pipe.load_model(model_path):
            return True
        logger.warning("Falling back to training from %s", args.train)

    if pipe.train(args.train, args.train_cache) is None:
        return False
    pipe.save_model(model_path)
    return True


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=config.LOG_FORMAT)

    pipe = SpamPipeline()
    prepare_model(pipe, args)

    logger.info("Message: %s", args.message)
    prediction = pipe.predict(args.message)
    if prediction is not None:
        logger.info("Prediction: %s", prediction.upper())

    result = pipe.evaluate_file(args.test, args.test_cache)
    if result is not None:
        logger.info("Evaluation Result:\n%s", result.report())
        if args.metrics_json:
            out = Path(args.metrics_json); out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(json.dumps(result.to_dict(), indent=2), encoding="utf-8")
        if args.plot:
            from .plots import plot_confusion
            plot_confusion(result, args.plot)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
