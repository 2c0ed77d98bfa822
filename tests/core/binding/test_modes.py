"""
Copy and read-write (alias) semantics for scalars, sequences and mappings.
"""
import pytest

from subparams import (
    Kind,
    Mode,
    ParameterKindError,
    Ref,
    call_stack,
    mapping,
    param,
    scalar,
    sequence,
    want_params,
)


########################################################
#### Test case: scalars
########################################################

@want_params
def specimen(*args):
    foo = param(Mode.RW)
    foo = "new value"
    return foo


def test_rw_scalar_writes_back_to_the_callers_ref():
    foo = Ref("foo value")
    specimen(foo)
    assert foo.value == "new value"


def test_rw_scalar_by_attribute_dispatch():
    @want_params("named")
    def bump(*args):
        counter = scalar.rw
        counter += 1

    counter = Ref(41)
    bump("counter", counter)
    assert counter.value == 42


def test_rw_scalar_writes_back_when_the_body_raises():
    @want_params
    def partial(*args):
        value = param("rw")
        value = "written before failing"
        raise RuntimeError("failed")

    cell = Ref("original")
    with pytest.raises(RuntimeError):
        partial(cell)
    assert cell.value == "written before failing"


def test_rw_scalar_leaves_storage_untouched_when_the_local_is_deleted():
    @want_params
    def forget(*args):
        value = param("rw")
        del value

    cell = Ref("kept")
    forget(cell)
    assert cell.value == "kept"


def test_rw_scalar_receives_the_current_value():
    @want_params
    def read(*args):
        value = param("rw")
        return value

    assert read(Ref(7)) == 7


def test_rw_scalar_without_ref_writes_back_to_the_argument_slot():
    seen = []

    @want_params
    def body(*args):
        seen.append(call_stack.peek())
        value = param("rw")
        value = "changed"

    plain = "unchanged"
    body(plain)
    assert plain == "unchanged"
    assert seen[0].args == ["changed"]


def test_copy_scalar_dereferences_a_ref_and_isolates_the_caller():
    @want_params
    def body(*args):
        value = param()
        value = value * 2
        return value

    cell = Ref(21)
    assert body(cell) == 42
    assert cell.value == 21


########################################################
#### Test case: sequences
########################################################

def test_copy_sequence_is_a_shallow_copy():
    @want_params
    def body(*args):
        items = sequence.copy
        items.append(3)
        return items

    original = [1, 2]
    assert body(original) == [1, 2, 3]
    assert original == [1, 2]


def test_copy_sequence_accepts_tuples():
    @want_params
    def body(*args):
        items = param(kind=Kind.SEQUENCE)
        return items

    assert body((1, 2)) == [1, 2]


def test_rw_sequence_shares_the_callers_list():
    @want_params
    def body(*args):
        items = sequence.rw
        items.append("added")
        return items

    original = ["kept"]
    assert body(original) is original
    assert original == ["kept", "added"]


def test_rw_sequence_sees_caller_side_mutation_mid_call():
    original = [1]

    def caller_side():
        original.append(2)

    @want_params
    def body(*args):
        items = sequence.rw
        callback = param()
        callback()
        return list(items)

    assert body(original, caller_side) == [1, 2]


def test_rw_sequence_rebinding_is_written_back_to_a_ref():
    @want_params
    def body(*args):
        items = sequence.rw
        items = ["replaced"]

    cell = Ref(["original"])
    body(cell)
    assert cell.value == ["replaced"]


def test_sequence_rejects_non_sequences():
    @want_params
    def body(*args):
        items = sequence.copy
        return items

    with pytest.raises(ParameterKindError, match=r"can't assign non-sequence reference to '@items'"):
        body(42)
    with pytest.raises(ParameterKindError, match="non-sequence"):
        body("a string")
    with pytest.raises(ParameterKindError, match="non-sequence"):
        body({"a": 1})


########################################################
#### Test case: mappings
########################################################

def test_copy_mapping_is_a_shallow_copy():
    @want_params
    def body(*args):
        options = mapping.copy
        options["added"] = True
        return options

    original = {"kept": 1}
    assert body(original) == {"kept": 1, "added": True}
    assert original == {"kept": 1}


def test_copy_mapping_is_shallow():
    @want_params
    def body(*args):
        options = mapping.copy
        options["nested"].append(2)

    original = {"nested": [1]}
    body(original)
    assert original == {"nested": [1, 2]}


def test_rw_mapping_shares_the_callers_dict():
    @want_params("named")
    def body(*args):
        options = mapping("rw")
        options["added"] = True

    original = {"kept": 1}
    body("options", original)
    assert original == {"kept": 1, "added": True}


def test_mapping_rejects_non_mappings():
    @want_params
    def body(*args):
        options = param(kind=Kind.MAPPING)
        return options

    with pytest.raises(ParameterKindError, match=r"can't assign non-mapping reference to '%options'"):
        body(["a", "b"])
    with pytest.raises(ParameterKindError, match="non-mapping"):
        body(Ref("scalar"))
