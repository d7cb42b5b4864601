from todo.cli.main import cli


def test_e2e_fresh_database_add_then_list(cli_runner, tmp_path):
    """
    End-to-end scenario on a database path that does not exist yet.

        • `add buy milk` creates the file and schema, then inserts item 1
        • listing prints exactly one, non-struck line
    """
    db_path = tmp_path / "nested-name.db"
    assert not db_path.exists()

    added = cli_runner.invoke(cli, ["-d", str(db_path), "add", "buy milk"])
    assert added.exit_code == 0, added.output
    assert db_path.exists()

    listing = cli_runner.invoke(cli, ["-d", str(db_path)], color=True)
    assert listing.exit_code == 0, listing.output
    assert listing.output == "1: buy milk\n"


def test_e2e_fresh_database_list_is_empty(cli_runner, tmp_path):
    db_path = tmp_path / "empty.db"

    listing = cli_runner.invoke(cli, ["-d", str(db_path)])

    assert listing.exit_code == 0, listing.output
    assert listing.output == ""
    assert db_path.exists()


def test_e2e_done_then_remove_keeps_remaining_ids(cli_runner, tmp_path):
    """
    Full item lifecycle:

        • add three items
        • mark the second done
        • remove the first
        • remaining items keep their original ids; only item 2 is struck
    """
    db = str(tmp_path / "todo.db")

    for note in ("a", "b", "c"):
        assert cli_runner.invoke(cli, ["-d", db, "add", note]).exit_code == 0

    assert cli_runner.invoke(cli, ["-d", db, "done", "2"]).exit_code == 0
    assert cli_runner.invoke(cli, ["remove", "1", "-d", db]).exit_code == 0

    plain = cli_runner.invoke(cli, ["-d", db])
    assert plain.output.splitlines() == ["2: b", "3: c"]

    styled = cli_runner.invoke(cli, ["-d", db], color=True).output.splitlines()
    assert "\x1b[9mb" in styled[0]
    assert styled[1] == "3: c"
