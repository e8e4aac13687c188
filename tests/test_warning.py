import warnings

import pytest

from justcore.warning import DotenvLoadWarning


def test_render_prefix():
    warning = DotenvLoadWarning()
    assert warning.render() == "warning: " + str(warning)


def test_message_mentions_settings():
    text = str(DotenvLoadWarning())
    assert "set dotenv-load := true" in text
    assert "set dotenv-load := false" in text
    assert text.startswith("A `.env` file was found and loaded")


def test_can_be_issued_as_warning():
    with pytest.warns(DotenvLoadWarning) as record:
        warnings.warn(DotenvLoadWarning())
    assert "dotenv-load" in str(record[0].message)