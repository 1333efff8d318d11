import pytest
from pathlib import Path

from jarpack.core.common.enums import Severity, SourceLanguage
from jarpack.features.declaration_extractor.domain.models import (
    Declared,
    Duplicate,
    Malformed,
    NamespaceValue,
    Unreadable,
)
from jarpack.features.namespace_validation.domain.models import PathMode, PrefixMode, mode_for
from jarpack.features.namespace_validation.service.checker import ConsistencyChecker, expected_namespace
from jarpack.features.source_scanner.domain.models import SourceFile

def source(relative: str) -> SourceFile:
    language = SourceLanguage.KOTLIN if relative.endswith(".kt") else SourceLanguage.JAVA
    return SourceFile(path=Path("src") / relative, relative_path=Path(relative), language=language)

def declared(dotted: str) -> Declared:
    return Declared(NamespaceValue.parse(dotted))

PATH = ConsistencyChecker(PathMode())
PREFIX = ConsistencyChecker(PrefixMode("com.example"))

# --- Mode selection ---

def test_prefix_selects_prefix_mode():
    assert mode_for("com.example") == PrefixMode("com.example")
    assert mode_for(None) == PathMode()
    assert mode_for("") == PathMode()
    assert mode_for(None, "com.example") == PathMode(advisory_prefix="com.example")

def test_prefix_mode_rejects_empty_prefix():
    with pytest.raises(ValueError):
        PrefixMode("")

def test_unknown_mode_is_rejected():
    with pytest.raises(TypeError):
        ConsistencyChecker("prefix")

def test_expected_namespace_from_directory():
    assert expected_namespace(source("foo/bar/Baz.java")) == NamespaceValue.parse("foo.bar")
    assert expected_namespace(source("Main.java")) == NamespaceValue()

# --- Path mode ---

def test_path_mode_match_passes():
    outcome = PATH.check(source("foo/Bar.java"), declared("foo"))
    assert outcome.severity is Severity.PASS
    assert outcome.message == ""

def test_path_mode_mismatch_names_both_values():
    outcome = PATH.check(source("foo/Bar.java"), declared("other"))

    assert outcome.is_error
    assert outcome.message == "src/foo/Bar.java: Expected package 'foo', found 'other'"

def test_path_mode_root_file_without_package_passes():
    assert PATH.check(source("Main.java"), declared("")).severity is Severity.PASS

def test_path_mode_root_file_with_package_fails():
    outcome = PATH.check(source("Main.java"), declared("foo"))
    assert outcome.message == "src/Main.java: Expected package '(default)', found 'foo'"

def test_path_mode_missing_package_in_subdir_fails():
    outcome = PATH.check(source("foo/Bar.java"), declared(""))
    assert outcome.message == "src/foo/Bar.java: Expected package 'foo', found '(default)'"

def test_path_mode_has_no_prefix_relaxation():
    outcome = PATH.check(source("foo/Bar.java"), declared("foo.bar"))
    assert outcome.is_error

# --- Prefix mode ---

@pytest.mark.parametrize("dotted", ["com.example", "com.example.util", "com.example.a.b.c"])
def test_prefix_mode_accepts_prefix_and_children(dotted):
    assert PREFIX.check(source("anything/X.kt"), declared(dotted)).severity is Severity.PASS

@pytest.mark.parametrize("dotted", ["com.examples", "com.exampl", "com", "org.example", "com.example_util"])
def test_prefix_mode_rejects_everything_else(dotted):
    outcome = PREFIX.check(source("com/example/X.kt"), declared(dotted))

    assert outcome.is_error
    assert outcome.message == f"src/com/example/X.kt: Expected package starting with 'com.example', found '{dotted}'"

def test_prefix_mode_ignores_directories():
    outcome = PREFIX.check(source("totally/unrelated/X.java"), declared("com.example.util"))
    assert outcome.severity is Severity.PASS

def test_prefix_mode_missing_declaration_is_error():
    outcome = PREFIX.check(source("Main.java"), declared(""))

    assert outcome.is_error
    assert outcome.message == "src/Main.java: Missing package declaration! Expected package starting with 'com.example'"

# --- Extraction failures take precedence ---

@pytest.mark.parametrize("checker", [PATH, PREFIX])
def test_duplicate_is_error_in_every_mode(checker):
    outcome = checker.check(source("foo/Bar.java"), Duplicate(2))
    assert outcome.message == "src/foo/Bar.java: Multiple package declarations found"

@pytest.mark.parametrize("checker", [PATH, PREFIX])
def test_unreadable_is_error_in_every_mode(checker):
    outcome = checker.check(source("foo/Bar.java"), Unreadable("boom"))
    assert outcome.message == "Cannot read file src/foo/Bar.java: boom"

@pytest.mark.parametrize("checker", [PATH, PREFIX])
def test_malformed_is_error_in_every_mode(checker):
    outcome = checker.check(source("foo/Bar.java"), Malformed("package foo"))
    assert outcome.message == "src/foo/Bar.java: Malformed package declaration: 'package foo'"

def test_unknown_outcome_is_rejected():
    with pytest.raises(TypeError):
        PATH.check(source("foo/Bar.java"), "foo")

# --- Advisory prefix (path mode only) ---

ADVISORY = ConsistencyChecker(PathMode(advisory_prefix="com.example"))

def test_advisory_warns_outside_prefix():
    outcome = ADVISORY.check(source("org/other/X.java"), declared("org.other"))

    assert outcome.is_warning
    assert outcome.message == "src/org/other/X.java: Package 'org.other' does not start with 'com.example'"

def test_advisory_silent_inside_prefix():
    outcome = ADVISORY.check(source("com/example/X.java"), declared("com.example"))
    assert outcome.severity is Severity.PASS

def test_advisory_skips_default_package():
    assert ADVISORY.check(source("Main.java"), declared("")).severity is Severity.PASS

def test_path_error_takes_precedence_over_advisory():
    outcome = ADVISORY.check(source("org/X.java"), declared("net"))
    assert outcome.is_error
