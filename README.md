# probity

probity is a small unit-test toolkit. It has assertions for integers of
several widths and display styles, for floating-point values, for strings and
for raw memory. A runner counts tests, prints each test's result and writes a
summary in a fixed plain-text format. A set of option and name filters decides
which tests a run should include.

## Installing

```
pip install .
```

To run the package's own test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `probity.styles` holds the enumerations that control checks and output.
  - `DisplayStyle` (`INT8` … `INT64`, `UINT8` … `UINT64`, `HEX8` … `HEX64`,
    `CHAR`, and the aliases `INT` and `UINT`) sets an integer's width and says
    whether it prints signed, unsigned or in hex. Its methods are `width()`,
    `is_signed()`, `is_unsigned()` and `is_hex()`.
  - `Comparison` sets the relation that `assert_compare` expects:
    `GREATER_THAN`, `SMALLER_THAN`, `EQUAL_TO`, their "or equal" combinations,
    and `NOT_EQUAL`.
  - `FloatTrait` names a special float state: infinity, negative infinity,
    NaN or determinate. Each state also has a negated form. `expects_trait()`
    says whether the value should have the trait.
  - `ArrayMode` picks how arrays are compared. With `ARRAY_TO_ARRAY`,
    elements are compared pairwise. With `ARRAY_TO_VAL`, every element is
    compared against one value.
- `probity.formatting` holds the text forms used in failure messages.
  - `escape_char` and `escape_text` leave printable ASCII as it is. They
    write CR and LF as `\r` and `\n`, and any other character as `\xHH`.
  - `format_number`, `format_unsigned`, `format_hex` and `format_mask` format
    integers. The mask form writes `1`/`0` for masked bits and `X` for the
    rest, across 64 bits.
  - `format_float` writes a float much like `%.7g`, or like `%.9g` when
    `double_precision` is true.
  - `format_by_style` formats an integer according to a `DisplayStyle`.
- `probity.runner` holds `TestRunner` and the exceptions `TestAbort`,
  `TestFailed` and `TestIgnored`.
- `probity.numbers` holds the integer assertions.
  - `assert_bits` checks the bits selected by a mask.
  - `assert_equal_number` checks for equality.
  - `assert_compare` checks a value against a threshold.
  - `assert_within` checks that a value lies within a delta.
  - `assert_equal_int_array` and `assert_array_within` make the same checks on
    arrays.
  - Values are first read at the width and signedness of the given style. For
    example, `-1` and `255` are equal as `UINT8`.
- `probity.floats` holds the float assertions.
  - `floats_within` compares two values within a delta. Infinities of the same
    sign match. Two NaNs also match unless `nan_equal` is false.
  - `assert_floats_within`, `assert_equal_float_array` and
    `assert_float_special` are the float assertions. By default they round
    values to single precision. Pass `double=True` to keep full precision.
  - Array elements must agree to a relative precision of `1e-5`, or `1e-12`
    with `double=True`.
- `probity.text` holds the string and memory assertions.
  - `assert_equal_string` and `assert_equal_string_len` compare strings up to
    the first NUL. The `_len` form compares at most the given number of bytes.
  - `assert_equal_string_array` compares arrays of strings.
  - `assert_equal_memory` compares blocks of bytes and reports the element and
    byte that differ.
- `probity.options` holds the test selection.
  - `parse_options` reads an argument list whose first entry is the program
    name. It returns `Options`. The options are:
    - `-l` lists the tests.
    - `-n`/`-f` includes tests by name.
    - `-x` excludes tests by name.
    - `-q` makes output quiet and `-v` makes it verbose.

    Give a value as `-n=NAME` or `-n NAME`. A missing value or an unknown
    option raises `OptionError`.
  - `test_matches` and `argument_matches` decide whether a test file and test
    name are selected.
  - A pattern may list several parts, separated by commas or quotes. Each part
    can be a file name, a test name, or `file:test`. A leading `*` matches
    everything.

## How failures behave

The assertions do not print anything. A failing assertion raises `TestFailed`.
`TestRunner.fail` also raises `TestFailed`. `TestRunner.ignore` raises
`TestIgnored`. Both exceptions derive from `TestAbort`.

`TestRunner.run` works like this:

1. It calls the set-up function, then the test.
2. It calls the tear-down function, catching failures separately.
3. It concludes the test.

If any other exception comes out of test code, the test counts as failed.

A failure is written as:

```
file:line:test:FAIL: Expected 5 Was 6. your message
```

When an assertion is given no line, the runner uses the test's own line. A
passing test is written as `file:line:test:PASS`.

Passing zero elements to any array or memory assertion is a failure, and so
is giving `assert_equal_memory` a length of zero. The message is "You Asked
Me To Compare Nothing, Which Was Pointless." Passing `None` for only one of
the two arrays fails. Passing `None` for both passes.

## Example

```python
from probity.numbers import assert_equal_number
from probity.runner import TestRunner
from probity.styles import DisplayStyle


def check_answer():
    assert_equal_number(42, 6 * 7, DisplayStyle.INT, None, 12)


runner = TestRunner()
runner.begin("test_answers.py")
runner.run(check_answer, "check_answer", 10, None, None)
failures = runner.end()
```

`end()` writes a line of dashes and then `N Tests F Failures I Ignored`. It
then writes `OK` when nothing failed, or `FAIL` otherwise. It returns the
number of failures.

## What probity does not do

probity has no command to run. It does not discover tests in files, so you
pass each test function to `TestRunner.run` yourself. `parse_options` only
parses arguments and `test_matches` only answers whether a test is selected.
Acting on `-l` and on the verbosity setting is left to the caller. Output is
always plain text, with no colour.