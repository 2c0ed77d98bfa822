import dis
import sys
from types import SimpleNamespace

import pytest

from subparams import ParameterDeclarationError
from subparams.capabilities import (
    ArgSlot,
    BytecodeNameIntrospector,
    FrameLocalsAliaser,
    LexicalAliaser,
    NameIntrospector,
)

introspector = BytecodeNameIntrospector()


def declared_name():
    return introspector.resolve(sys._getframe(1))


def test_resolves_a_local_assignment():
    def body():
        answer = declared_name()
        return answer

    assert body() == "answer"


def test_resolves_an_annotated_assignment():
    def body():
        answer: str = declared_name()
        return answer

    assert body() == "answer"


def test_resolves_a_cell_variable():
    def body():
        shared = declared_name()

        def reader():
            return shared

        return reader()

    assert body() == "shared"


def test_resolves_a_global_assignment():
    def body():
        global resolved_global
        resolved_global = declared_name()

    body()
    assert resolved_global == "resolved_global"


def test_resolves_while_the_call_sits_in_its_inline_caches():
    def body():
        answer = declared_name()
        return answer

    store = next(i for i in dis.get_instructions(body) if i.opname.startswith("STORE_FAST"))
    # While a call runs, f_lasti may point at the last cache entry before the store.
    frame = SimpleNamespace(f_code=body.__code__, f_lasti=store.offset - 2, f_lineno=0)
    assert introspector.resolve(frame) == "answer"


def test_resolves_consecutive_plain_calls():
    def body():
        first = declared_name()
        second = declared_name()
        return first, second

    assert body() == ("first", "second")


def test_rejects_a_result_that_is_not_stored():
    def body():
        return declared_name()

    with pytest.raises(ParameterDeclarationError):
        body()


def test_rejects_an_attribute_target():
    class Target:
        pass

    def body(target):
        target.attr = declared_name()

    with pytest.raises(ParameterDeclarationError):
        body(Target())


def test_default_capabilities_satisfy_their_protocols():
    assert isinstance(BytecodeNameIntrospector(), NameIntrospector)
    assert isinstance(FrameLocalsAliaser(), LexicalAliaser)


def test_aliaser_writes_the_final_local_into_the_storage():
    args = ["before"]
    aliaser = FrameLocalsAliaser()

    def body():
        value = "before"
        alias = aliaser.alias(sys._getframe(), "value", ArgSlot(args, 0), value)
        value = "after"
        return alias

    alias = body()
    assert aliaser.release(alias) is True
    assert args == ["after"]
    # A released alias no longer refers to the frame.
    assert alias.frame is None
    assert aliaser.release(alias) is False


def test_arg_slot_reads_and_writes_one_slot():
    args = [1, 2, 3]
    slot = ArgSlot(args, 1)
    assert slot.index == 1
    assert slot.value == 2
    slot.value = 20
    assert args == [1, 20, 3]
