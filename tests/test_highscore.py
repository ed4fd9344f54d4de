"""Tests for trivia_snake.highscore."""

from trivia_snake.highscore import FileHighScoreStore, MemoryHighScoreStore


class TestMemoryHighScoreStore:
    def test_round_trip(self) -> None:
        store = MemoryHighScoreStore()
        assert store.get() == 0
        store.set(9)
        assert store.get() == 9
        assert store.writes == 1


class TestFileHighScoreStore:
    def test_missing_file_reads_zero(self, tmp_path) -> None:
        assert FileHighScoreStore(tmp_path / "nope").get() == 0

    def test_set_creates_parent_dirs(self, tmp_path) -> None:
        path = tmp_path / "a" / "b" / "highscore"
        store = FileHighScoreStore(path)
        store.set(14)
        assert path.read_text().strip() == "14"
        assert FileHighScoreStore(path).get() == 14

    def test_malformed_reads_zero(self, tmp_path, caplog) -> None:
        path = tmp_path / "highscore"
        path.write_text("lots")
        assert FileHighScoreStore(path).get() == 0
        assert "malformed" in caplog.text

    def test_negative_reads_zero(self, tmp_path) -> None:
        path = tmp_path / "highscore"
        path.write_text("-3\n")
        assert FileHighScoreStore(path).get() == 0

    def test_directory_reads_zero(self, tmp_path) -> None:
        assert FileHighScoreStore(tmp_path).get() == 0

    def test_unwritable_path_logs_and_continues(self, tmp_path, caplog) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("")
        store = FileHighScoreStore(blocker / "highscore")
        store.set(5)
        assert "Could not save high score" in caplog.text
        assert store.get() == 0
