"""Tests for the command line interface."""

import pytest

from ftlsim.cli import EXIT_EXHAUSTED, EXIT_OK, main


class TestCLI:
    """CLI tests."""

    def test_simulate_reference(self, tmp_path, capsys):
        ssd = tmp_path / "SSD.txt"

        code = main(["simulate", "--ssd-file", str(ssd), "--quiet"])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "Total physical writes: 220" in out
        assert "Block writes:" not in out
        assert ssd.stat().st_size == 512 * 4096
        assert ssd.read_bytes()[:4096] == b"\xab" * 4096

    def test_simulate_exhausted(self, tmp_path, capsys):
        workload = tmp_path / "workload.txt"
        workload.write_text("0 0 0 0 1 1 1 1 0\n")

        code = main(
            [
                "--blocks", "4", "--logical", "2", "--lifespan", "2", "--block-size", "16",
                "simulate", "--workload", str(workload), "--ssd-file", str(tmp_path / "SSD.txt"),
            ]
        )

        assert code == EXIT_EXHAUSTED
        assert "Flash exhausted at request 8" in capsys.readouterr().out

    def test_bench_sequential(self, tmp_path, capsys):
        code = main(["bench", "--runs", "2", "--ssd-file", str(tmp_path / "SSD.txt")])

        assert code == EXIT_OK
        assert "Benchmark: 2 runs (sequential)" in capsys.readouterr().out

    def test_bench_parallel(self, tmp_path, capsys):
        code = main(["bench", "--runs", "3", "--parallel"])

        assert code == EXIT_OK
        assert "Benchmark: 3 runs (parallel)" in capsys.readouterr().out

    def test_invalid_geometry(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["--blocks", "1", "simulate", "--ssd-file", str(tmp_path / "SSD.txt")])

    def test_missing_workload_file(self, tmp_path, capsys):
        """Test that an unreadable workload is a usage error, not a device error."""
        ssd = tmp_path / "SSD.txt"

        with pytest.raises(SystemExit) as exc:
            main(["simulate", "--workload", str(tmp_path / "nope.txt"), "--ssd-file", str(ssd)])

        assert exc.value.code == 2
        assert "cannot load workload" in capsys.readouterr().err
        assert not ssd.exists()

    def test_malformed_workload(self, tmp_path, capsys):
        workload = tmp_path / "workload.txt"
        workload.write_text("1 2 x\n")

        with pytest.raises(SystemExit) as exc:
            main(["simulate", "--workload", str(workload), "--ssd-file", str(tmp_path / "SSD.txt")])

        assert exc.value.code == 2
        assert "cannot load workload" in capsys.readouterr().err

    def test_bench_missing_workload_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["bench", "--runs", "1", "--workload", str(tmp_path / "nope.txt")])

        assert exc.value.code == 2
