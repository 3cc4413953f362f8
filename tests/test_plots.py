from smsfilter.evaluate import evaluate
from smsfilter.model import fit
from smsfilter.plots import plot_confusion


def test_plot_confusion_writes_png(tmp_path, tiny_dataset):
    res = evaluate(fit(tiny_dataset), tiny_dataset)
    out = plot_confusion(res, tmp_path / "figs" / "cm.png")
    assert out.exists()
    assert out.read_bytes()[:4] == b"\x89PNG"
