"""
Smoke test to verify test infrastructure works
"""

from pathlib import Path


def test_package_structure_exists():
    """The trello_tools package and its scripts should be importable"""
    package_dir = Path(__file__).parent.parent / "trello_tools"
    assert package_dir.is_dir(), "trello_tools/ package should exist"
    assert (package_dir / "__init__.py").exists()
    assert (package_dir / "scripts" / "__init__.py").exists()


def test_can_import_main_module():
    """Verify the public API is exported"""
    import trello_tools

    for name in ("TrelloClient", "ListArchiver", "ListMover", "RetroBoardReset", "select"):
        assert hasattr(trello_tools, name), f"Should export {name}"


def test_scripts_import():
    """Every console script module should expose main()"""
    from trello_tools.scripts import (
        archive_lists_by_range,
        copy_lists,
        count_lists,
        get_board_id,
        move_lists_by_pattern,
        reset_retro_board,
    )

    for module in (
        archive_lists_by_range,
        copy_lists,
        count_lists,
        get_board_id,
        move_lists_by_pattern,
        reset_retro_board,
    ):
        assert callable(module.main)
