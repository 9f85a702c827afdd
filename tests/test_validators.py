from git_follow.validators import is_int, is_pathspec, is_repo


def test_is_int_accepts_plain_digits():
    assert is_int("42")
    assert is_int("0")


def test_is_int_rejects_non_digits():
    assert not is_int("4a")
    assert not is_int("")
    assert not is_int(None)
    assert not is_int("-3")
    assert not is_int("+3")
    assert not is_int(" 3")
    assert not is_int("3\n")


def test_is_pathspec_checks_object_at_ref(make_inspector):
    inspector = make_inspector(objects=["HEAD:src/app.py"])

    assert is_pathspec(inspector, "HEAD", "src/app.py")
    assert not is_pathspec(inspector, "v1.0", "src/app.py")
    assert ("object_exists", "v1.0", "src/app.py") in inspector.calls


def test_is_repo_delegates_to_inspector(make_inspector):
    assert is_repo(make_inspector(inside=True))
    assert not is_repo(make_inspector(inside=False))
