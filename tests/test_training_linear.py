import pytest

import TrainingLinear


def test_main_prints_predictions(capsys):
    code = TrainingLinear.main(["--epochs", "20", "--seed", "1", "--log-interval", "0",
                                "--predict", "5", "10"])
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Training..."
    assert lines[1] == "Done."
    assert lines[2].startswith("for x=5.0 predict y=")
    assert lines[3].startswith("for x=10.0 predict y=")


def test_bad_learning_rate_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        TrainingLinear.main(["--lr", "0"])
    assert exc.value.code == 2
    assert "learning rate" in capsys.readouterr().err


def test_unknown_activation_rejected():
    with pytest.raises(SystemExit):
        TrainingLinear.main(["--hidden-activation", "softmax"])
