def test_import_starbattle_package() -> None:
    import importlib

    module = importlib.import_module("starbattle")
    assert module is not None
    assert module.__version__


def test_import_rng_no_side_effects() -> None:
    from starbattle.core.rng import RNG

    rng = RNG(42)
    value = rng.randint(0, 1)
    assert value in (0, 1)


def test_import_cli_entry_point() -> None:
    from starbattle.main import main

    assert callable(main)
