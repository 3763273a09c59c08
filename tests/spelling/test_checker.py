"""
Tests for the Spell Checker
===========================
Dictionary loading, word checking, and end-of-run reports.
"""

import logging

import pytest

from hashspell.checker import SpellChecker, CheckedWords, DICTIONARY_OPEN_ERROR, TEXT_OPEN_ERROR
from hashspell.config_logging import FileError, HashSpellConfig


@pytest.fixture
def checker() -> SpellChecker:
    return SpellChecker(config=HashSpellConfig(log_to_console=False))


@pytest.fixture
def loaded_checker(checker, write_file) -> SpellChecker:
    checker.load_dictionary(write_file('dict.txt', 'cat dog\nbake\n\ndish\n'))
    return checker


class TestLoadDictionary:
    """Tests for dictionary loading."""

    def test_load_counts_words(self, loaded_checker):
        assert loaded_checker.table.dict_length == 4

    def test_load_words_iterable(self, checker):
        assert checker.load_words(['cat', 'dog']) == 2
        assert checker.table.dict_length == 2

    def test_missing_dictionary(self, checker, tmp_path):
        with pytest.raises(FileError) as exc_info:
            checker.load_dictionary(tmp_path / 'missing.txt')
        assert exc_info.value.message == DICTIONARY_OPEN_ERROR
        assert exc_info.value.exit_code == 1

    def test_directory_as_dictionary(self, checker, tmp_path):
        with pytest.raises(FileError):
            checker.load_dictionary(tmp_path)

    def test_undecodable_dictionary(self, checker, tmp_path):
        path = tmp_path / 'bad.txt'
        path.write_bytes(b'cat \xff\xfe dog\n')
        with pytest.raises(FileError) as exc_info:
            checker.load_dictionary(path)
        assert exc_info.value.code == 'FILE_ERROR'

    def test_load_keeps_logger_configuration(self, write_file):
        checker = SpellChecker(config=HashSpellConfig(log_level='DEBUG', log_to_console=False))
        module_logger = logging.getLogger('hashspell.checker')
        handlers = list(module_logger.handlers)

        checker.load_dictionary(write_file('dict.txt', 'cat dog\n'))

        assert module_logger.level == logging.DEBUG
        assert module_logger.handlers == handlers
        assert checker.logger.is_enabled_for(logging.DEBUG)

    def test_failed_load_keeps_logger_configuration(self, tmp_path):
        checker = SpellChecker(config=HashSpellConfig(log_level='DEBUG', log_to_console=False))
        module_logger = logging.getLogger('hashspell.checker')
        handlers = list(module_logger.handlers)

        with pytest.raises(FileError):
            checker.load_dictionary(tmp_path / 'missing.txt')

        assert module_logger.level == logging.DEBUG
        assert module_logger.handlers == handlers

    def test_empty_dictionary_warns(self, write_file, tmp_path):
        config = HashSpellConfig(log_to_console=False, log_to_file=True,
                                 log_dir=tmp_path / 'logs')
        checker = SpellChecker(config=config)
        assert checker.load_dictionary(write_file('empty.txt', '\n  \n')) == 0
        for handler in checker.logger.logger.handlers:
            handler.flush()
        log_text = (tmp_path / 'logs' / 'hashspell.log').read_text(encoding='utf-8')
        assert '[WARNING]' in log_text
        assert 'Dictionary file has no words' in log_text


class TestCheckWord:
    """Tests for check_word() and check_words()."""

    def test_accepted_word(self, loaded_checker):
        assert loaded_checker.check_word('cats') is True
        assert loaded_checker.words_checked == 1
        assert loaded_checker.misspelled == 0

    def test_misspelled_word(self, loaded_checker):
        assert loaded_checker.check_word('xyzzy') is False
        assert loaded_checker.misspelled == 1
        assert loaded_checker.misspelled_words[0].word == 'xyzzy'
        assert loaded_checker.misspelled_words[0].word_number == 1

    def test_check_words_yields_rejections_in_order(self, loaded_checker):
        rejected = list(loaded_checker.check_words(['cats', 'zork', 'baked', 'Cats', 'dishes']))
        assert rejected == ['zork', 'Cats']
        assert loaded_checker.words_checked == 5
        assert [m.word_number for m in loaded_checker.misspelled_words] == [2, 4]

    def test_check_text(self, loaded_checker):
        assert list(loaded_checker.check_text('The cats baked.')) == ['The']


class TestCheckFile:
    """Tests for check_file()."""

    def test_check_file(self, loaded_checker, write_file):
        path = write_file('text.txt', 'The cats baked xyzzy.\n')
        assert list(loaded_checker.check_file(path)) == ['The', 'xyzzy']
        assert loaded_checker.words_checked == 4

    def test_missing_text_fails_before_iteration(self, loaded_checker, tmp_path):
        with pytest.raises(FileError) as exc_info:
            loaded_checker.check_file(tmp_path / 'missing.txt')
        assert exc_info.value.message == TEXT_OPEN_ERROR

    def test_undecodable_text(self, loaded_checker, tmp_path):
        path = tmp_path / 'bad.txt'
        path.write_bytes(b'cat \xff dog')
        with pytest.raises(FileError):
            list(loaded_checker.check_file(path))

    def test_small_chunks(self, write_file):
        checker = SpellChecker(config=HashSpellConfig(log_to_console=False, chunk_size=1))
        checker.load_words(['cat'])
        path = write_file('text.txt', 'cat cats caats')
        assert list(checker.check_file(path)) == ['caats']

    def test_returns_closable_words(self, loaded_checker, write_file):
        words = loaded_checker.check_file(write_file('text.txt', 'The cats'))
        assert isinstance(words, CheckedWords)
        assert not words.closed
        words.close()
        assert words.closed

    def test_with_block_closes_file(self, loaded_checker, write_file):
        with loaded_checker.check_file(write_file('text.txt', 'The zork xyzzy')) as words:
            assert next(words) == 'The'
        assert words.closed
        assert loaded_checker.words_checked == 1

    def test_exhausted_words_close_file(self, loaded_checker, write_file):
        words = loaded_checker.check_file(write_file('text.txt', 'cat zork'))
        assert list(words) == ['zork']
        assert words.closed

    def test_decode_failure_closes_file(self, loaded_checker, tmp_path):
        path = tmp_path / 'bad.txt'
        path.write_bytes(b'cat \xff dog')
        words = loaded_checker.check_file(path)
        with pytest.raises(FileError):
            list(words)
        assert words.closed


class TestReport:
    """Tests for report()."""

    def test_counters(self, loaded_checker, write_file):
        list(loaded_checker.check_file(write_file('text.txt', 'The cats baked xyzzy.')))
        report = loaded_checker.report()
        assert report.dictionary_words == 4
        assert report.words_checked == 4
        assert report.misspelled == 2
        assert report.total_lookups == 8
        assert report.total_probes == 8
        assert report.average_probes_per_word == pytest.approx(2.0)
        assert report.average_probes_per_lookup == pytest.approx(1.0)
        assert report.table_stats is None

    def test_empty_run_has_no_averages(self, checker):
        report = checker.report()
        assert report.words_checked == 0
        assert report.average_probes_per_word is None
        assert report.average_probes_per_lookup is None

    def test_table_stats(self, loaded_checker):
        report = loaded_checker.report(include_table_stats=True)
        assert report.table_stats['entries'] == 4
        assert report.table_stats['occupied_slots'] == 4

    def test_to_dict(self, loaded_checker):
        loaded_checker.check_word('zork')
        data = loaded_checker.report().to_dict()
        assert data['misspelled_words'] == [{'word': 'zork', 'word_number': 1}]
        assert 'table_stats' not in data
