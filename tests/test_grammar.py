# tests/test_grammar.py - Grammar matching tests
"""
Tests for the grammar nodes, builders and the completion matcher.
"""
import os

import pytest

from cmdcomplete.completion import CompletionContext, auto_complete
from cmdcomplete.errors import CursorError
from cmdcomplete.fs.local import FileSystemListing
from cmdcomplete.fs.remote import RemoteContext
from cmdcomplete.grammar import (
    ACState,
    Outcome,
    Text,
    Word,
    either,
    flag,
    local_fs_file,
    local_fs_folder,
    local_fs_path,
    opt,
    param,
    remote_fs_file,
    remote_fs_folder,
    remote_fs_path,
    repeat,
    sequence,
    text,
    wholenumber,
)

from conftest import MockListing


def complete(grammar, line, cursor=None, unix_style=True, context=None):
    """Return candidate texts for line with the cursor at the end by default."""
    if cursor is None:
        cursor = len(line)
    state = auto_complete(line, cursor, grammar, unix_style, context)
    return [c.text for c in state.completions]


@pytest.fixture
def get_url():
    """Return the grammar: get <url>."""
    return sequence(text("get"), param("url"))


class TestText:
    """Tests for literal and parameter text nodes."""

    def test_literal_at_cursor(self, get_url):
        """Test a partial keyword completes."""
        assert complete(get_url, "ge") == ["get"]

    def test_literal_case_insensitive(self, get_url):
        """Test prefix matching ignores case."""
        assert complete(get_url, "GE") == ["get"]

    def test_literal_matches_before_cursor(self, get_url):
        """Test a matched keyword moves on to the parameter."""
        assert complete(get_url, "get ") == ["<url>"]
        assert complete(get_url, "GET ") == ["<url>"]

    def test_param_placeholder_needs_empty_word(self, get_url):
        """Test a placeholder is not offered once the user typed something."""
        assert complete(get_url, "get x") == []

    def test_mismatch_stops_branch(self, get_url):
        """Test a wrong keyword yields nothing."""
        assert complete(get_url, "put ") == []

    def test_past_end_of_grammar(self, get_url):
        """Test words beyond the grammar yield nothing."""
        assert complete(get_url, "get a ") == []

    def test_candidates_case_insensitive(self, get_url):
        """Test text candidates carry the case-insensitive flag."""
        state = auto_complete("g", 1, get_url)
        assert state.completions[0].case_insensitive


class TestEither:
    """Tests for alternatives."""

    def test_all_alternatives_offered(self):
        """Test both keywords are offered on an empty line."""
        grammar = either(text("get"), text("put"))
        assert complete(grammar, "") == ["get", "put"]

    def test_union_law(self):
        """Test Either(A, B) offers the deduplicated union of A and B."""
        a = either(text("get"), text("grep"))
        b = either(text("go"), text("get"))

        union = complete(a, "g") + [t for t in complete(b, "g") if t not in complete(a, "g")]
        assert complete(either(a, b), "g") == union == ["get", "grep", "go"]

    def test_continues_after_matching_alternative(self):
        """Test the next element follows whichever alternative matched."""
        grammar = sequence(either(text("get"), text("put")), param("name"))
        assert complete(grammar, "put ") == ["<name>"]
        assert complete(grammar, "del ") == []

    def test_alternatives_reaching_cursor_at_different_depths(self):
        """Test a longer and a shorter alternative both contribute."""
        grammar = sequence(either(sequence(text("a"), text("b")), text("a")), text("c"))
        assert complete(grammar, "a ") == ["b", "c"]

    def test_shared_subgrammar(self):
        """Test one node linked from two parents works from both."""
        shared = text("x")
        grammar = either(sequence(text("a"), shared), sequence(text("b"), shared))
        assert complete(grammar, "a ") == ["x"]
        assert complete(grammar, "b ") == ["x"]


class TestOptional:
    """Tests for optional elements."""

    @pytest.fixture
    def grammar(self):
        return sequence(opt(flag("-R")), text("list"), param("x"))

    def test_skip_law(self, grammar):
        """Test the following element matches without the optional one."""
        assert complete(grammar, "list ") == ["<x>"]

    def test_present(self, grammar):
        """Test the optional element consumes its word."""
        assert complete(grammar, "-R list ") == ["<x>"]
        assert complete(grammar, "-R ") == ["list"]

    def test_at_cursor_offers_both(self, grammar):
        """Test the optional element and the next one are both offered."""
        assert complete(grammar, "") == ["-R", "list"]

    def test_flag_needs_marker(self, grammar):
        """Test flags are only offered for empty or dash-prefixed words."""
        assert complete(grammar, "l") == ["list"]
        assert complete(grammar, "-") == ["-R"]

    def test_flag_case_insensitive(self, grammar):
        """Test a flag matches regardless of case, like a keyword."""
        assert complete(grammar, "-r list ") == ["<x>"]
        assert complete(grammar, "-x list ") == []

    def test_mismatch_inside_optional_sequence(self):
        """Test a partially matched optional sequence is skipped as a whole."""
        grammar = sequence(opt(sequence(text("to"), text("dest"))), text("go"))
        assert complete(grammar, "to dest g") == ["go"]
        assert complete(grammar, "to ") == ["dest"]
        assert complete(grammar, "to x g") == []


class TestRepeat:
    """Tests for repeated elements."""

    @pytest.fixture
    def grammar(self):
        return sequence(text("x"), repeat(text("alpha")), text("end"), param("tail"))

    def test_zero_occurrences(self, grammar):
        """Test the element after the repeat matches directly."""
        assert complete(grammar, "x end ") == ["<tail>"]

    def test_many_occurrences(self, grammar):
        """Test several occurrences are consumed."""
        assert complete(grammar, "x alpha alpha end ") == ["<tail>"]

    def test_another_occurrence_offered(self, grammar):
        """Test another occurrence and the next element are offered at the boundary."""
        assert complete(grammar, "x ") == ["alpha", "end"]
        assert complete(grammar, "x alpha alpha ") == ["alpha", "end"]

    def test_partial_word_at_boundary(self, grammar):
        """Test prefix filtering at the boundary."""
        assert complete(grammar, "x alpha e") == ["end"]
        assert complete(grammar, "x a") == ["alpha"]

    def test_repeat_of_alternatives(self):
        """Test repeating an Either."""
        grammar = sequence(text("rm"), repeat(either(text("alpha"), text("beta"))))
        assert complete(grammar, "rm ") == ["alpha", "beta"]
        assert complete(grammar, "rm beta alpha b") == ["beta"]

    def test_repeat_reaching_cursor_inside_occurrence(self):
        """Test the cursor inside one occurrence only offers that occurrence."""
        grammar = sequence(repeat(sequence(text("set"), param("value"))), text("go"))
        assert complete(grammar, "set ") == ["<value>"]
        assert complete(grammar, "set 1 ") == ["set", "go"]

    def test_repeat_of_optional_terminates(self):
        """Test a subnode matching without consuming does not loop."""
        grammar = sequence(repeat(opt(text("a"))), text("b"))
        assert complete(grammar, "a a ") == ["a", "b"]
        assert complete(grammar, "c ") == []


class TestWholeNumber:
    """Tests for number parameters."""

    @pytest.fixture
    def grammar(self):
        return sequence(text("wait"), wholenumber(10), text("done"))

    def test_default_at_cursor(self, grammar):
        assert complete(grammar, "wait ") == ["10"]
        assert complete(grammar, "wait 1") == ["10"]
        assert complete(grammar, "wait 2") == []

    def test_number_matches(self, grammar):
        assert complete(grammar, "wait 5 ") == ["done"]

    def test_non_number_mismatches(self, grammar):
        assert complete(grammar, "wait x ") == []
        assert complete(grammar, "wait -1 ") == []

    def test_negative_default_rejected(self):
        with pytest.raises(ValueError):
            wholenumber(-1)


class TestLocalPath:
    """Tests for local path completion."""

    def test_prefix_filter(self, mock_listing):
        """Test entries are filtered by the partial word."""
        context = CompletionContext(local=mock_listing)
        assert complete(local_fs_path(), "fo", context=context) == ["foo.txt", "foobar"]
        assert mock_listing.calls == [("fo", True, True)]

    def test_listing_flags(self, mock_listing):
        """Test files/folders flags are passed to the listing."""
        context = CompletionContext(local=mock_listing)
        complete(local_fs_file(), "", context=context)
        complete(local_fs_folder(), "", context=context)
        assert mock_listing.calls == [("", True, False), ("", False, True)]

    def test_folder_part_kept(self, mock_listing):
        """Test the directory part prefixes every entry."""
        context = CompletionContext(local=mock_listing)
        assert complete(local_fs_path(), "src/fo", context=context) == ["src/foo.txt", "src/foobar"]

    def test_windows_separator(self, mock_listing):
        """Test backslashes split paths under the Windows convention."""
        context = CompletionContext(local=mock_listing)
        result = complete(local_fs_path(), "src\\FO", unix_style=False, context=context)
        assert result == ["src\\foo.txt", "src\\foobar"]
        assert mock_listing.calls == [("src/FO", True, True)]

    def test_listing_failure_gives_nothing(self):
        """Test a failing listing degrades to no candidates."""
        context = CompletionContext(local=MockListing([], error=PermissionError("denied")))
        grammar = either(local_fs_path(), text("fallback"))
        assert complete(grammar, "f", context=context) == ["fallback"]

    def test_any_word_accepted_before_cursor(self, mock_listing):
        """Test paths are not validated away from the cursor."""
        context = CompletionContext(local=mock_listing)
        grammar = sequence(local_fs_file(), text("to"))
        assert complete(grammar, "/no/such/file t", context=context) == ["to"]
        assert mock_listing.calls == []

    def test_real_filesystem(self, tmp_path):
        """Test completion over a real directory."""
        (tmp_path / "a.txt").write_text("")
        (tmp_path / "adir").mkdir()
        (tmp_path / "adir" / "inner.txt").write_text("")
        context = CompletionContext(local=FileSystemListing(tmp_path))

        assert complete(local_fs_path(), "a", context=context) == ["a.txt", "adir" + os.sep]
        assert complete(local_fs_folder(), "", context=context) == ["adir" + os.sep]
        assert complete(local_fs_path(), "adir/", context=context) == ["adir/inner.txt"]
        assert complete(local_fs_path(), "missing/", context=context) == []

    def test_real_filesystem_windows_separator(self, tmp_path):
        """Test a backslash path lists the named folder, not the current one."""
        (tmp_path / "top.txt").write_text("")
        (tmp_path / "adir").mkdir()
        (tmp_path / "adir" / "inner.txt").write_text("")
        context = CompletionContext(local=FileSystemListing(tmp_path))

        result = complete(local_fs_path(), "adir\\", unix_style=False, context=context)
        assert result == ["adir\\inner.txt"]


class TestRemotePath:
    """Tests for remote path completion."""

    def test_folders_and_files(self, remote_context):
        assert complete(remote_fs_folder(), "", context=remote_context) == ["docs/", "music/", "my docs/"]
        assert complete(remote_fs_file(), "", context=remote_context) == ["a.txt"]

    def test_sub_folder(self, remote_context):
        result = complete(remote_fs_path(), "docs/", context=remote_context)
        assert result == ["docs/notes.txt", "docs/readme.txt"]

    def test_live_current_directory(self, remote_fs, remote_context):
        """Test a directory change is seen without rebuilding anything."""
        grammar = sequence(text("get"), remote_fs_file())
        assert complete(grammar, "get ", context=remote_context) == ["a.txt"]

        remote_fs.cwd = remote_fs.resolve(remote_fs.root, "docs")
        assert complete(grammar, "get ", context=remote_context) == ["notes.txt", "readme.txt"]

    def test_missing_folder(self, remote_context):
        assert complete(remote_fs_path(), "nope/x", context=remote_context) == []

    def test_invalid_current_directory(self, remote_fs):
        context = CompletionContext(remote=RemoteContext(remote_fs, lambda: 999))
        assert complete(remote_fs_path(), "", context=context) == []

    def test_no_remote_context(self):
        assert complete(remote_fs_path(), "", context=CompletionContext(local=MockListing([]))) == []

    def test_quoted_partial(self, remote_context):
        """Test a partial word inside an open quote."""
        grammar = sequence(text("cd"), remote_fs_folder())
        assert complete(grammar, 'cd "my', context=remote_context) == ["my docs/"]


class TestTraversalState:
    """Tests for ACState."""

    def test_requires_cursor_word(self):
        with pytest.raises(CursorError):
            ACState(words=[])

    def test_index_range_checked(self):
        with pytest.raises(CursorError):
            ACState(words=[Word("a", 0, 1)], i=1)

    def test_duplicate_candidates_ignored(self):
        state = ACState(words=[Word("", 0, 0)])
        state.add_completion("get")
        state.add_completion("get", case_insensitive=True)
        assert [c.text for c in state.completions] == ["get"]

    def test_outcome_halted(self):
        assert Outcome.AT_CURSOR.halted
        assert Outcome.MISMATCH.halted
        assert not Outcome.ADVANCED.halted
        assert not Outcome.SKIPPED.halted

    def test_text_node_directly(self):
        state = ACState(words=[Word("get", 0, 3), Word("", 4, 4)])
        assert Text("get").add_completions(state) is Outcome.ADVANCED
        assert state.i == 1
        assert Text("url", True).add_completions(state) is Outcome.AT_CURSOR
        assert [c.text for c in state.completions] == ["<url>"]


class TestDescribe:
    """Tests for usage rendering."""

    def test_sequence_with_options(self):
        grammar = sequence(text("ls"), opt(flag("-R")), opt(remote_fs_folder()))
        assert grammar.describe() == "ls [-R] [remotefolder]"

    def test_either(self):
        assert either(text("a"), text("b")).describe() == "(a|b)"
        assert either(text("a")).describe() == "a"

    def test_either_with_prefix(self):
        grammar = either(text("a"), sequence(text("b"), wholenumber(3)), describe_prefix="  ")
        assert grammar.describe() == "  a\n  b <3>"

    def test_repeat_and_param(self):
        assert repeat(param("f")).describe() == "<f>*"

    def test_paths(self):
        assert local_fs_file("src").describe() == "srclocalfile"
        assert local_fs_path().describe() == "localpath"
        assert remote_fs_folder("dst").describe() == "dstremotefolder"

    def test_str(self):
        assert str(text("get")) == "get"


class TestBuilders:
    """Tests for builder functions."""

    def test_sequence_needs_nodes(self):
        with pytest.raises(ValueError):
            sequence()

    def test_sequence_of_one(self):
        node = text("a")
        assert sequence(node) is node

    def test_long_sequence(self):
        """Test sequences are not limited in length."""
        words = [f"w{n}" for n in range(12)]
        grammar = sequence(*(text(w) for w in words))
        assert complete(grammar, " ".join(words[:11]) + " ") == ["w11"]
