from git_follow.options import (
    CONFLICTS,
    DEFAULT_ARGS,
    OPTIONS,
    format_option,
    prune_conflicts,
    render_options,
    resolve_range,
    set_args,
)


def test_flag_options_render_as_long_flags():
    flags = [spec.name for spec in OPTIONS if spec.log_option and spec.max_args == 0]
    assert flags == ["first", "no-merges", "no-patch", "no-renames", "reverse"]

    for name in flags:
        if name == "first":
            continue
        assert format_option(name, True, "foo.py") == [f"--{name}"]


def test_first_requests_added_diff_filter():
    assert format_option("first", True, "foo.py") == ["--diff-filter=A"]


def test_last_defaults_to_one_commit():
    assert format_option("last", None, "foo.py") == ["--max-count=1"]
    assert format_option("last", "", "foo.py") == ["--max-count=1"]
    assert format_option("last", "5", "foo.py") == ["--max-count=5"]


def test_last_passes_malformed_counts_through():
    assert format_option("last", "abc", "foo.py") == ["--max-count=abc"]


def test_lines_without_end_runs_to_end_of_file():
    assert format_option("lines", ("10",), "foo.py") == ["-L", "10:foo.py"]
    assert format_option("lines", ("10", None), "foo.py") == ["-L", "10:foo.py"]


def test_lines_with_end():
    assert format_option("lines", ("10", "20"), "foo.py") == ["-L", "10,20:foo.py"]


def test_func_embeds_function_name_and_pathspec():
    assert format_option("func", "main", "src/app.c") == ["-L:main:src/app.c"]


def test_pickaxe_searches_for_string():
    assert format_option("pickaxe", "needle in haystack", "foo.py") == ["-Sneedle in haystack"]


def test_range_delegates_to_resolver():
    assert format_option("range", ("3", "5"), "foo.py") == ["@{3}..@{5}"]
    assert format_option("range", ("master",), "foo.py") == ["master..HEAD"]


def test_resolve_range_defaults_end_to_head():
    assert resolve_range("master") == "master..HEAD"
    assert resolve_range("master", "") == "master..HEAD"


def test_resolve_range_wraps_numeric_bounds_independently():
    assert resolve_range("3", "5") == "@{3}..@{5}"
    assert resolve_range("3") == "@{3}..HEAD"
    assert resolve_range("v1.0", "2") == "v1.0..@{2}"
    assert resolve_range("v1.0", "v2.0") == "v1.0..v2.0"


def test_set_args_uses_given_argument_or_default():
    options = {}

    set_args("last", "3", options, DEFAULT_ARGS)
    assert options == {"last": "3"}

    set_args("last", None, options, DEFAULT_ARGS)
    assert options == {"last": "1"}

    set_args("reverse", None, options, DEFAULT_ARGS)
    assert options == {"last": "1", "reverse": None}


def test_set_args_overwrites_without_merging():
    options = {}
    set_args("lines", ("1", "2"), options)
    set_args("lines", ("7",), options)

    assert options == {"lines": ("7",)}


def test_prune_conflicts_removes_superseded_options():
    options = {"no-merges": "-M", "reverse": "-R"}

    prune_conflicts("no-merges", {"no-merges": ["reverse"]}, options)

    assert options == {"no-merges": "-M"}


def test_prune_conflicts_ignores_unset_and_unlisted_options():
    options = {"reverse": True}

    prune_conflicts("no-merges", {"no-merges": ["first"]}, options)
    prune_conflicts("pickaxe", CONFLICTS, options)

    assert options == {"reverse": True}


def test_first_and_last_supersede_each_other():
    options = {"last": "2"}
    set_args("first", True, options)
    prune_conflicts("first", CONFLICTS, options)
    assert options == {"first": True}

    set_args("last", "4", options)
    prune_conflicts("last", CONFLICTS, options)
    assert options == {"last": "4"}


def test_render_options_keeps_command_line_order():
    options = {"reverse": True, "lines": ("3", "9"), "pickaxe": "TODO"}

    assert render_options(options, "foo.py") == [
        "--reverse",
        "-L",
        "3,9:foo.py",
        "-STODO",
    ]


def test_last_zero_falls_back_to_one_commit():
    assert format_option("last", "0", "foo.py") == ["--max-count=1"]
