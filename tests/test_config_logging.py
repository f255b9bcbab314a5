"""
Tests for configuration loading and logging.

Validates that:
1. Environment variables (and .env files) drive the Config singleton
2. Invalid values fail at load time
3. Color mode resolves to a concrete on/off decision
4. Soft failures are logged on the evaluation channel, never raised
5. An invalid environment cannot break evaluation or rendering
6. Lazy singletons survive concurrent first use
"""

import logging
import threading
from datetime import datetime

import pytest

from predicates import DiffAlgorithm, RegexError, file_equals, path_is_file, regex_matches, similar_to
from predicates.config import ColorMode, Config, DisplayConfig, get_config, reload_config
from predicates.utils.logger import PredicateLogger, get_logger, setup_logger


class TestConfigLoading:
    """Config singleton and environment variables."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PREDICATES_COLOR")
        config = reload_config()

        assert config.log.level == "WARNING"
        assert config.log.log_dir is None
        assert config.display.color_mode == ColorMode.AUTO
        assert config.diff.algorithm is DiffAlgorithm.SEQUENCE

    def test_singleton(self):
        assert get_config() is get_config()

    def test_reload_picks_up_env(self, monkeypatch):
        monkeypatch.setenv("PREDICATES_LOG_LEVEL", "debug")
        monkeypatch.setenv("PREDICATES_DIFF_ALGORITHM", "AutoJunk")

        config = reload_config()

        assert config.log.level == "DEBUG"
        assert config.diff.algorithm is DiffAlgorithm.AUTOJUNK
        assert get_config() is config

    @pytest.mark.parametrize("name,value", [
        ("PREDICATES_LOG_LEVEL", "verbose"),
        ("PREDICATES_COLOR", "sometimes"),
        ("PREDICATES_DIFF_ALGORITHM", "myers"),
    ])
    def test_invalid_values_raise(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)

        with pytest.raises(ValueError, match=name):
            reload_config()

    def test_dotenv_file(self, monkeypatch, tmp_path):
        """A .env in the working directory overrides the environment."""
        monkeypatch.setenv("PREDICATES_DIFF_ALGORITHM", "sequence")
        monkeypatch.setenv("PREDICATES_LOG_LEVEL", "WARNING")
        (tmp_path / ".env").write_text(
            "PREDICATES_DIFF_ALGORITHM=autojunk\nPREDICATES_LOG_LEVEL=info\n"
        )
        monkeypatch.chdir(tmp_path)

        config = reload_config()

        assert config.diff.algorithm is DiffAlgorithm.AUTOJUNK
        assert config.log.level == "INFO"

    def test_summary_short(self):
        summary = get_config().summary_short()

        assert "log: WARNING -> console" in summary
        assert "color: never" in summary
        assert "diff: sequence" in summary


class TestColorMode:
    """DisplayConfig.use_color()."""

    def test_always_and_never(self):
        assert DisplayConfig("always").use_color() is True
        assert DisplayConfig("never").use_color() is False

    def test_auto_follows_tty(self, monkeypatch):
        class FakeTty:
            def __init__(self, tty):
                self.tty = tty

            def isatty(self):
                return self.tty

        monkeypatch.setattr("sys.stdout", FakeTty(True))
        assert DisplayConfig("auto").use_color() is True

        monkeypatch.setattr("sys.stdout", FakeTty(False))
        assert DisplayConfig("auto").use_color() is False

    def test_mode_is_case_insensitive(self):
        assert DisplayConfig(" NEVER ").color_mode == "never"


class TestLogger:
    """PredicateLogger singleton and channels."""

    def test_get_logger_is_singleton(self):
        assert get_logger() is get_logger()
        assert isinstance(get_logger(), PredicateLogger)

    def test_setup_logger_replaces_instance(self):
        first = get_logger()
        second = setup_logger("DEBUG")

        assert second is not first
        assert get_logger() is second
        assert second.main_logger.level == logging.DEBUG

    def test_channels(self):
        logger = get_logger()

        assert logger.main_logger.name == "predicates"
        assert logger.eval_logger.name == "predicates.eval"

    def test_soft_failure_format(self, eval_log):
        get_logger().soft_failure("var is file", "cannot read metadata", path="/x", error="boom")

        record = eval_log.records[-1]
        assert record.name == "predicates.eval"
        assert record.levelno == logging.DEBUG
        assert record.getMessage() == "[SOFT_FAIL] var is file | cannot read metadata | path=/x | error=boom"

    def test_soft_failure_from_evaluation(self, tmp_path, eval_log):
        """Evaluation logs and returns False instead of raising."""
        assert path_is_file().evaluate(tmp_path / "missing") is False

        messages = [r.getMessage() for r in eval_log.records if r.name == "predicates.eval"]
        assert any(m.startswith("[SOFT_FAIL] var is file") for m in messages)

    def test_file_output(self, tmp_path):
        log_dir = tmp_path / "logs"
        logger = setup_logger("INFO", str(log_dir))

        logger.info("predicate tree built")

        log_file = log_dir / f"predicates_{datetime.now().strftime('%Y%m%d')}.log"
        assert log_file.exists()
        content = log_file.read_text(encoding="utf-8")
        assert "predicate tree built" in content
        # File output stays free of ANSI codes
        assert "\x1b[" not in content

    def test_log_dir_from_config(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PREDICATES_LOG_DIR", str(tmp_path / "from_env"))
        config = reload_config()

        setup_logger(config.log.level, config.log.log_dir)

        assert (tmp_path / "from_env").is_dir()


class TestInvalidConfigDuringEvaluation:
    """A bad environment value never escapes from evaluate or find_case."""

    @pytest.fixture
    def broken_env(self, monkeypatch):
        """Invalid settings with both singletons dropped, as in a fresh process."""
        def _break(name: str, value: str):
            monkeypatch.setenv(name, value)
            monkeypatch.setattr(Config, "_instance", None)
            monkeypatch.setattr("predicates.utils.logger._logger", None)
        return _break

    def test_unreadable_candidate_is_false(self, hello_file, tmp_path, broken_env, caplog):
        pred = file_equals(hello_file)
        broken_env("PREDICATES_LOG_LEVEL", "verbose")

        assert pred.evaluate(tmp_path / "missing.txt") is False
        assert "Invalid configuration, using default logging" in caplog.text

    def test_bad_pattern_still_raises_regex_error(self, broken_env):
        broken_env("PREDICATES_LOG_LEVEL", "verbose")

        with pytest.raises(RegexError):
            regex_matches("(")

    def test_diff_case_renders_plain(self, broken_env, caplog):
        pred = similar_to("abc").max_changes(1)
        broken_env("PREDICATES_COLOR", "sometimes")

        case = pred.find_case(True, "abd")

        assert case.product_value("diff") == "ab{~d~}"
        assert "rendering without color" in caplog.text


class TestConcurrentFirstUse:
    """Lazy singletons are created once under concurrent first access."""

    THREADS = 8

    def _race(self, fn):
        barrier = threading.Barrier(self.THREADS)
        results = []

        def worker():
            barrier.wait()
            results.append(fn())

        threads = [threading.Thread(target=worker) for _ in range(self.THREADS)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        return results

    def test_get_config(self, monkeypatch):
        monkeypatch.setattr(Config, "_instance", None)

        results = self._race(get_config)

        assert len(results) == self.THREADS
        assert all(r is results[0] for r in results)

    def test_get_logger(self, monkeypatch):
        monkeypatch.setattr("predicates.utils.logger._logger", None)
        PredicateLogger._instance = None
        PredicateLogger._initialized = False

        results = self._race(get_logger)

        assert all(r is results[0] for r in results)
        assert len(logging.getLogger("predicates").handlers) == 1
