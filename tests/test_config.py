from config.config import validate_config, EVALUATOR_CONFIG


def test_validate_config(capsys):
    validate_config()
    assert "validated" in capsys.readouterr().out
    assert EVALUATOR_CONFIG["default_variable_value"] == 0.0
