from subparams.config._global_setting import GlobalSetting

__all__ = [
    "GlobalSetting",
]
