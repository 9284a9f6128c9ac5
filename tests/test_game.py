"""
Тесты партии: ходы, команды, истечение времени
"""
import pytest

from conftest import ScriptedConsole
from wordduel.game import GameSession, SessionState
from wordduel.match import MatchState, PlayerIdentity


PLAYERS = PlayerIdentity("Alice", "Bob")


def make_session(script, stats, timers, locale="en"):
    return GameSession(ScriptedConsole(script), locale, PLAYERS, stats, timer_factory=timers)


class TestMatchState:
    """Состояние партии без консоли"""

    def test_start(self):
        match = MatchState.start("beautiful")
        assert match.used_words == ["beautiful"]
        assert match.current_player == 1

    def test_players_alternate_on_accepted_moves(self):
        match = MatchState.start("beautiful")
        order = []
        for word in ["table", "tea", "lute", "bat"]:
            assert match.apply_move(word)
            order.append(match.current_player)
        assert order == [2, 1, 2, 1]

    def test_rejected_move_changes_nothing(self):
        match = MatchState.start("beautiful")
        assert not match.apply_move("xyz")
        assert match.current_player == 1
        assert match.used_words == ["beautiful"]


class TestOriginalWord:
    """Выбор исходного слова"""

    def test_reprompts_until_valid(self, stats, timers):
        session = make_session(["short", "with space", "Beautiful"], stats, timers)
        assert session.read_original_word() == "beautiful"
        prompts = [line for line in session.console.output if line.startswith("Enter the original")]
        assert len(prompts) == 3


class TestMoves:
    """Обработка ввода во время партии"""

    def test_beautiful_scenario(self, stats, timers):
        session = make_session(
            [
                "beautiful",
                "table",
                "table",
                "xyz",
                lambda: timers.expire("late"),
            ],
            stats,
            timers,
        )
        result = session.run()

        assert session.state is SessionState.ENDED
        assert session.match.used_words == ["beautiful", "table"]
        assert result.winner == "Alice"
        assert result.loser == "Bob"
        assert stats.get_wins("Alice") == 1
        assert stats.get_wins("Bob") == 0
        assert result.used_words == ["beautiful", "table"]
        out = session.console.output
        assert out.count("Invalid word. Try again.") == 2
        assert out[-1] == "Time's up! Player Bob loses."
        # "late" пришло после истечения таймера и не обработано
        assert "late" not in session.match.used_words

    def test_accepted_move_resets_timer(self, stats, timers):
        session = make_session([], stats, timers)
        session.begin("beautiful")
        for _ in range(10):
            timers.current.tick()
        assert session.seconds_remaining == 5

        assert session.handle_input("table")
        assert session.match.current_player == 2
        assert session.seconds_remaining == 15

    def test_invalid_move_keeps_timer(self, stats, timers):
        session = make_session([], stats, timers)
        session.begin("beautiful")
        timers.current.tick()
        assert not session.handle_input("xyz")
        assert session.seconds_remaining == 14
        assert session.match.current_player == 1

    def test_prompt_shows_player_and_time(self, stats, timers):
        session = make_session(["table"], stats, timers)
        session.begin("beautiful")
        timers.current.tick()
        session.step()
        assert session.console.output[0] == "Player Alice, enter a word (14 seconds left):"
        assert session.match.current_player == 2

    def test_expiry_between_read_and_reset(self, stats, timers):
        session = make_session([], stats, timers)
        session.begin("beautiful")
        timers.expire()
        assert not session.handle_input("table")
        assert session.state is SessionState.ENDED
        assert session.result.loser == "Alice"
        assert session.match.used_words == ["beautiful"]

    def test_russian_messages(self, stats, timers):
        session = make_session(["космонавтика", "сок", lambda: timers.expire()], stats, timers, locale="ru")
        result = session.run()
        assert result.loser == "Bob"
        assert session.console.output[-1] == "Время вышло! Игрок Bob проиграл."


class TestCommandsInMatch:
    """Команды не меняют состояние партии"""

    def test_score_mid_match(self, stats, timers):
        stats.record_win("Alice")
        session = make_session([], stats, timers)
        session.begin("beautiful")
        session.handle_input("table")
        timers.current.tick()

        assert not session.handle_input("/score")

        assert session.console.output[-1] == "Current players' scores: Alice: 1, Bob: 0"
        assert session.match.current_player == 2
        assert session.match.used_words == ["beautiful", "table"]
        assert session.seconds_remaining == 14

    def test_commands_are_case_insensitive(self, stats, timers):
        session = make_session([], stats, timers)
        session.begin("beautiful")
        session.handle_input("/SHOW-WORDS")
        assert session.console.output == ["Used words in current game:", "beautiful"]

    def test_unknown_command(self, stats, timers):
        session = make_session([], stats, timers)
        session.begin("beautiful")
        session.handle_input("/help")
        assert session.console.output == ["Unknown command."]
        assert session.match.current_player == 1


class TestAbandon:
    """Прерванная партия"""

    def test_acting_player_loses(self, stats, timers):
        session = make_session([], stats, timers)
        session.begin("beautiful")
        session.handle_input("table")
        result = session.abandon()
        assert result.abandoned
        assert result.loser == "Bob"
        assert stats.get_wins("Alice") == 1
        assert not timers.current.expired

    def test_abandon_is_recorded_once(self, stats, timers):
        session = make_session([], stats, timers)
        session.begin("beautiful")
        session.abandon()
        assert session.abandon() is None
        assert stats.wins == {"Bob": 1}

    def test_abandon_before_start_does_nothing(self, stats, timers):
        session = make_session([], stats, timers)
        assert session.abandon() is None
        assert stats.wins == {}

    def test_eof_propagates(self, stats, timers):
        session = make_session(["beautiful"], stats, timers)
        with pytest.raises(EOFError):
            session.run()
        assert session.in_progress


def test_end_of_match_logs_words(stats, timers, caplog):
    session = make_session([], stats, timers)
    session.begin("beautiful")
    session.handle_input("table")
    session.handle_input("tea")
    with caplog.at_level("INFO", logger="wordduel.game"):
        result = session.abandon()
    assert result.used_words == ["beautiful", "table", "tea"]
    assert "words=table, tea" in caplog.text
