import pytest

from raycube.errors import CubError, ErrorKind, error_message


@pytest.mark.parametrize("kind", list(ErrorKind))
def test_every_message_has_error_header(kind):
    text = error_message(kind)
    assert text.startswith("Error\n")
    assert text.endswith("\n")
    assert text.count("\n") == 2


def test_messages_are_distinct():
    messages = {error_message(kind) for kind in ErrorKind}
    assert len(messages) == len(ErrorKind)


@pytest.mark.parametrize(
    "kind, text",
    [
        (ErrorKind.PROBLEM_ARGUMENTS, "Error\nNot enough or too many arguments.\n"),
        (ErrorKind.OPEN_FAILED, "Error\nFailed to open file\n"),
        (ErrorKind.INVALID_INFO, "Error\nInvalid informations in the .cub files\n"),
        (ErrorKind.INCORRECT_PLAYER, "Error\nIncorrect number of player\n"),
        (ErrorKind.BAD_EXTENSION, "Error\nBad extension\n"),
        (ErrorKind.EMPTY_FILE, "Error\nEmpty file\n"),
        (ErrorKind.TEXTURE, "Error\nPath texture is incorrect\n"),
    ],
)
def test_pinned_messages(kind, text):
    assert error_message(kind) == text


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        error_message("nope")


def test_cub_error_carries_kind_and_report():
    with pytest.raises(CubError) as info:
        raise CubError(ErrorKind.EMPTY_FILE)
    assert info.value.kind is ErrorKind.EMPTY_FILE
    assert info.value.report == error_message(ErrorKind.EMPTY_FILE)
    assert str(info.value) == "Empty file"


def test_cub_error_is_exception():
    err = CubError(ErrorKind.BAD_EXTENSION)
    assert isinstance(err, Exception)
    assert str(err) == "Bad extension"