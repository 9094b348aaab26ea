import pytest

from rustedos.shell import (
    Redirects,
    ShellSyntaxError,
    cd_target,
    extract_redirects,
    prompt,
    split_background,
    split_pipeline,
)


def test_split_background_strips_ampersand():
    assert split_background(["bgcount", "&"]) == (["bgcount"], True)


def test_split_background_foreground():
    args = ["ls", "/bin"]
    assert split_background(args) == (args, False)


def test_split_background_only_trailing():
    args = ["echo", "&", "x"]
    assert split_background(args) == (args, False)


def test_split_pipeline_without_pipe():
    assert split_pipeline(["ls"]) == (None, ["ls"])


def test_split_pipeline_single_pipe():
    assert split_pipeline(["cat", "f", "|", "wc"]) == (["cat", "f"], ["wc"])


def test_split_pipeline_splits_at_last_pipe():
    args = ["cat", "f", "|", "grep", "x", "|", "wc"]
    upstream, last = split_pipeline(args)
    assert last == ["wc"]
    assert upstream == ["cat", "f", "|", "grep", "x"]
    assert upstream + ["|"] + last == args


def test_extract_redirects_both():
    result = extract_redirects(["cat", "<", "in.txt", ">", "out.txt"])
    assert result == Redirects(["cat"], "in.txt", "out.txt")


def test_extract_redirects_none():
    assert extract_redirects(["ls", "-l"]) == Redirects(["ls", "-l"], None, None)


def test_extract_redirects_output_before_input():
    result = extract_redirects(["wc", ">", "o", "<", "i"])
    assert (result.args, result.stdin, result.stdout) == (["wc"], "i", "o")


@pytest.mark.parametrize("args", [["cat", "<"], ["cat", ">"], ["cat", "<", "f", ">"]])
def test_extract_redirects_missing_target(args):
    with pytest.raises(ShellSyntaxError, match="syntax error"):
        extract_redirects(args)


def test_cd_target_default_root():
    assert cd_target(["cd"]) == "/"


def test_cd_target_given():
    assert cd_target(["cd", "bin"]) == "bin"


def test_cd_target_too_many():
    with pytest.raises(ShellSyntaxError, match="too many arguments"):
        cd_target(["cd", "a", "b"])


def test_prompt_contains_cwd():
    text = prompt("/bin")
    assert text.startswith("root@rusted_os:")
    assert text.endswith("/bin# ")