"""Project-level path constants and model defaults."""
from pathlib import Path

DATASET_DIR = Path("dataset")
MODEL_DIR = Path("models")

TRAIN_DATA = DATASET_DIR / "train.txt"
TRAIN_CACHE = DATASET_DIR / "train.parquet"
TEST_DATA = DATASET_DIR / "test.txt"
TEST_CACHE = DATASET_DIR / "test.parquet"
MODEL_FILE = MODEL_DIR / "sms.joblib"

# declaration order matters: ties in the classifier go to the first label
LABELS = ("spam", "ham")

DEFAULT_ALPHA = 1.0
RANDOM_STATE = 42

DEMO_MESSAGE = "Ini adalah pesan email spam yang ingin Anda uji."

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
