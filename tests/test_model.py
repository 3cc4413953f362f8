import numpy as np
import pytest

from smsfilter.data import as_dataset, load_raw
from smsfilter.errors import EmptyTextError, ModelNotFittedError, TrainingError
from smsfilter.features import VectorizerConfig, build_vectorizer
from smsfilter.model import build_model, fit, is_fitted, predict, predict_many, predict_proba


def test_memorised_examples(tiny_dataset):
    model = fit(tiny_dataset)
    assert predict(model, "win money now") == "spam"
    assert predict(model, "let's meet for lunch") == "ham"


def test_vectorizer_lowercases_and_splits_on_non_word_chars():
    vec = build_vectorizer()
    vec.fit(["U r a WINNER!! Call-now"])
    assert sorted(vec.vocabulary_) == ["a", "call", "now", "r", "u", "winner"]


def test_vectorizer_config_defaults():
    vec = build_vectorizer(VectorizerConfig())
    assert vec.lowercase is True
    assert vec.ngram_range == (1, 1)
    with pytest.raises(ValueError):
        VectorizerConfig(ngram_range=(1, 2))


def test_prediction_is_case_insensitive(tiny_dataset):
    model = fit(tiny_dataset)
    assert predict(model, "WIN MONEY NOW") == "spam"


def test_unknown_tokens_ignored_and_ties_go_to_spam():
    model = fit(as_dataset([("spam", "aaa"), ("ham", "bbb")]))
    # equal priors, no known tokens: both classes score the same
    assert predict(model, "zzz qqq") == "spam"
    assert "zzz" not in model.named_steps["vect"].vocabulary_


def test_predict_empty_text(tiny_dataset):
    model = fit(tiny_dataset)
    for text in ("", "   "):
        with pytest.raises(EmptyTextError):
            predict(model, text)


def test_predict_unfitted():
    model = build_model()
    assert not is_fitted(model)
    with pytest.raises(ModelNotFittedError):
        predict(model, "hello")
    with pytest.raises(ModelNotFittedError):
        predict_proba(model, ["hello"])


def test_fit_rejects_degenerate_data():
    with pytest.raises(TrainingError):
        fit(as_dataset([]))
    with pytest.raises(TrainingError):
        fit(as_dataset([("spam", "!!!"), ("ham", "???")]))


def test_single_class_dataset_is_allowed():
    model = fit(as_dataset([("ham", "see you soon"), ("ham", "ok")]))
    assert predict(model, "free prize") == "ham"
    proba = predict_proba(model, ["free prize"])
    assert proba.shape == (1, 2)
    assert proba[0, 0] == 0.0


def test_refit_replaces_state(tiny_dataset):
    base = build_model()
    first = fit(tiny_dataset, base)
    second = fit(as_dataset([("ham", "win money now"), ("spam", "lunch")]), first)
    assert predict(first, "win money now") == "spam"
    assert predict(second, "win money now") == "ham"
    assert "meet" not in second.named_steps["vect"].vocabulary_
    assert not is_fitted(base)


def test_proba_columns_follow_label_order(train_file):
    model = fit(load_raw(train_file))
    proba = predict_proba(model, ["claim your free prize now", "see you at home tonight"])
    np.testing.assert_allclose(proba.sum(axis=1), 1.0)
    assert proba[0, 0] > proba[0, 1]
    assert proba[1, 1] > proba[1, 0]
    assert predict_many(model, ["claim your free prize now", "see you at home tonight"]) == ["spam", "ham"]
