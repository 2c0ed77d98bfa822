from subparams import GlobalSetting, Mode, Ref, Scheme, param, want_params
from subparams.capabilities import Alias, BytecodeNameIntrospector, FrameLocalsAliaser


def test_read_returns_a_singleton_with_defaults():
    setting = GlobalSetting.read()
    assert setting is GlobalSetting.read()
    assert setting.default_scheme is Scheme.POSITIONAL
    assert setting.default_mode is Mode.COPY
    assert setting.emit_events is True
    assert isinstance(setting.name_introspector, BytecodeNameIntrospector)
    assert isinstance(setting.aliaser, FrameLocalsAliaser)


def test_set_only_changes_given_fields():
    GlobalSetting.set(default_mode="rw")
    setting = GlobalSetting.read()
    assert setting.default_mode is Mode.RW
    assert setting.default_scheme is Scheme.POSITIONAL


def test_reset_restores_defaults():
    GlobalSetting.set(default_scheme=Scheme.NAMED, emit_events=False)
    GlobalSetting.reset()
    setting = GlobalSetting.read()
    assert setting.default_scheme is Scheme.POSITIONAL
    assert setting.emit_events is True


def test_default_scheme_applies_at_decoration_time():
    GlobalSetting.set(default_scheme="named")

    @want_params
    def body(*args):
        value = param()
        return value

    GlobalSetting.set(default_scheme="positional")
    assert body.__param_scheme__ is Scheme.NAMED
    assert body("other", 1, "value", 2) == 2


def test_default_mode_applies_at_declaration_time():
    @want_params
    def body(*args):
        value = param()
        value = "written"

    cell = Ref("original")
    body(cell)
    assert cell.value == "original"

    GlobalSetting.set(default_mode=Mode.RW)
    body(cell)
    assert cell.value == "written"


class FixedNameIntrospector:
    def __init__(self, name: str):
        self.name = name

    def resolve(self, frame) -> str:
        return self.name


def test_custom_name_introspector():
    GlobalSetting.set(default_scheme=Scheme.NAMED, name_introspector=FixedNameIntrospector("key"))

    @want_params
    def body(*args):
        return param()

    assert body("key", "found") == "found"


class RecordingAliaser:
    def __init__(self):
        self.released = []

    def alias(self, frame, name, storage, bound) -> Alias:
        return Alias(frame=None, name=name, storage=storage, bound=bound)

    def release(self, alias: Alias) -> bool:
        self.released.append((alias.name, alias.bound))
        alias.storage.value = "from recording aliaser"
        return True


def test_custom_aliaser():
    aliaser = RecordingAliaser()
    GlobalSetting.set(aliaser=aliaser)

    @want_params
    def body(*args):
        first = param("rw")
        second = param("rw")

    first, second = Ref(1), Ref(2)
    body(first, second)
    assert aliaser.released == [("first", 1), ("second", 2)]
    assert first.value == second.value == "from recording aliaser"
