import some_missing_thirdparty_lib  # noqa: F401
