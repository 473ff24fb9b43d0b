import random

import pytest

from tictactoe.ai import Difficulty
from tictactoe.game import GameBoard, GameMode, InvalidMoveError
from tictactoe.history import GameHistory


def pvp(tmp_path, username="alice"):
    game = GameBoard(username, history=GameHistory(username, tmp_path))
    game.set_game_mode(GameMode.PLAYER_VS_PLAYER)
    game.set_player_names("Alice", "Bob")
    return game


def play_all(game, moves):
    return [game.play(r, c) for r, c in moves]


WIN_X = [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]
WIN_O = [(0, 0), (1, 0), (0, 1), (1, 1), (2, 2), (1, 2)]
TIE = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]


def test_player_one_wins_and_board_resets(tmp_path):
    game = pvp(tmp_path)
    results = play_all(game, WIN_X)
    last = results[-1]
    assert all(not r.finished for r in results[:-1])
    assert last.outcome == "Alice wins"
    assert last.message == "Alice wins!"
    assert last.winner_symbol == "X"
    assert last.board[0] == ("X", "X", "X")
    assert game.player1_score == 1
    assert game.board == [[0] * 3 for _ in range(3)]
    assert game.moves == []
    assert game.current_player == 1


def test_win_is_saved_to_history(tmp_path):
    game = pvp(tmp_path)
    play_all(game, WIN_X)
    games = GameHistory("alice", tmp_path).load_games()
    assert len(games) == 1
    session = games[0]
    assert session.moves == WIN_X
    assert session.winner_symbol == "X"
    assert session.game_mode == "Player vs Player"
    assert session.player1_name == "Alice"
    assert session.player2_name == "Bob"


def test_player_two_wins(tmp_path):
    game = pvp(tmp_path)
    last = play_all(game, WIN_O)[-1]
    assert last.outcome == "Bob wins"
    assert last.winner_symbol == "O"
    assert game.player2_score == 1
    assert game.player1_score == 0


def test_tie(tmp_path):
    game = pvp(tmp_path)
    last = play_all(game, TIE)[-1]
    assert last.outcome == "Tie"
    assert last.message == "It's a tie!"
    assert last.winner_symbol == ""
    assert game.tie_score == 1
    assert GameHistory("alice", tmp_path).load_games()[0].outcome == "Tie"


def test_score_text_counts(tmp_path):
    game = pvp(tmp_path)
    play_all(game, WIN_X)
    play_all(game, TIE)
    assert game.score_text() == "Score: Alice: 1, Bob: 0, Ties: 1"


def test_guest_games_are_not_saved(tmp_path):
    history = GameHistory("bob", tmp_path)
    game = GameBoard("", history=history)
    game.set_player_names("", "")
    play_all(game, WIN_X)
    assert history.load_games() == []
    assert game.player1_score == 1


def test_filled_cell_is_rejected(tmp_path):
    game = pvp(tmp_path)
    game.play(1, 1)
    with pytest.raises(InvalidMoveError):
        game.play(1, 1)
    assert game.moves == [(1, 1)]


@pytest.mark.parametrize("cell", [(3, 0), (0, 3), (-1, 1)])
def test_off_board_is_rejected(tmp_path, cell):
    game = pvp(tmp_path)
    with pytest.raises(InvalidMoveError):
        game.play(*cell)


def test_turns_alternate_symbols(tmp_path):
    game = pvp(tmp_path)
    first = game.play(0, 0)
    second = game.play(2, 2)
    assert first.symbol == "X"
    assert second.symbol == "O"
    assert second.board[0][0] == "X"
    assert second.board[2][2] == "O"


def test_status_text_follows_turn(tmp_path):
    game = pvp(tmp_path)
    assert game.status_text() == "Current Player: Alice (X)"
    game.play(0, 0)
    assert game.status_text() == "Current Player: Bob (O)"


def test_default_names(tmp_path):
    guest = GameBoard("", history=GameHistory("", tmp_path))
    guest.set_player_names("", "")
    assert (guest.player1_name, guest.player2_name) == ("Player 1", "Player 2")
    user = GameBoard("carol", history=GameHistory("carol", tmp_path))
    user.set_player_names("", "Dan")
    assert (user.player1_name, user.player2_name) == ("carol", "Dan")


def test_symbol_choice_ignored_between_people(tmp_path):
    game = pvp(tmp_path)
    game.set_player_symbol("O")
    assert game.play(0, 0).symbol == "X"


def test_invalid_symbol_raises(tmp_path):
    game = pvp(tmp_path)
    with pytest.raises(ValueError):
        game.set_player_symbol("Z")


def ai_game(tmp_path, difficulty="Easy", symbol="X", seed=3):
    game = GameBoard("", history=GameHistory("", tmp_path), rng=random.Random(seed))
    game.set_game_mode(GameMode.PLAYER_VS_AI)
    game.set_ai_difficulty(difficulty)
    game.set_player_symbol(symbol)
    game.set_player_names("Player", "ignored")
    return game


def test_ai_answers_each_move(tmp_path):
    game = ai_game(tmp_path)
    result = game.play(1, 1)
    assert result.ai_move is not None
    assert result.ai_move != (1, 1)
    r, c = result.ai_move
    assert result.board[r][c] == "O"
    assert game.moves == [(1, 1), result.ai_move]
    assert game.current_player == 1


def test_ai_names_and_scores(tmp_path):
    game = ai_game(tmp_path)
    assert game.player2_name == "AI"
    assert game.score_text() == "Score: Player: 0, AI: 0, Ties: 0"


def test_player_may_take_o(tmp_path):
    game = ai_game(tmp_path, symbol="O")
    assert game.ai_symbol == "X"
    assert game.status_text() == "Current Player: Player (O)"
    result = game.play(0, 0)
    assert result.symbol == "O"
    r, c = result.ai_move
    assert result.board[r][c] == "X"


def test_hard_ai_never_loses(tmp_path):
    game = ai_game(tmp_path, difficulty=Difficulty.HARD)
    result = None
    for _ in range(5):
        r, c = next((r, c) for r in range(3) for c in range(3) if game.board[r][c] == 0)
        result = game.play(r, c)
        if result.finished:
            break
    assert result.finished
    assert result.outcome in ("AI wins", "Tie")
    assert game.player1_score == 0


def test_ai_win_is_saved(tmp_path):
    history = GameHistory("erin", tmp_path)
    game = GameBoard("erin", history=history, rng=random.Random(0))
    game.set_game_mode(GameMode.PLAYER_VS_AI)
    game.set_ai_difficulty("Hard")
    game.set_player_names("", "")
    result = None
    for _ in range(5):
        r, c = next((r, c) for r in range(3) for c in range(3) if game.board[r][c] == 0)
        result = game.play(r, c)
        if result.finished:
            break
    saved = history.load_games()
    assert len(saved) == 1
    assert saved[0].outcome == result.outcome
    assert saved[0].game_mode == "Player vs AI"
    assert saved[0].player1_name == "erin"


def test_invalid_difficulty_raises(tmp_path):
    game = pvp(tmp_path)
    with pytest.raises(ValueError):
        game.set_ai_difficulty("Impossible")


def test_switch_back_to_people_restores_symbols(tmp_path):
    game = ai_game(tmp_path, symbol="O")
    game.set_game_mode(GameMode.PLAYER_VS_PLAYER)
    assert (game.player_symbol, game.ai_symbol) == ("X", "O")
    assert game.ai_player is None