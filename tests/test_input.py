"""
Tests for keystroke matching: tracking, hits, misses, backspace, levels.
"""
from conftest import place
from typefall_config import CONFIG
from typefall_input import BACKSPACE, apply_keystroke, find_match
from typefall_state import Phase


def type_text(state, text, rng):
    for ch in text:
        apply_keystroke(state, ch, rng)
    return state


class TestMatching:
    """Prefix tracking of the current word."""

    def test_typing_cat_tracks_then_hits(self, state, rng):
        """c, a, t track 1 and 2 letters then destroy the word."""
        w = place(state, "cat", x=10, y=0)
        score = state.score
        level = state.level

        apply_keystroke(state, "c", rng)
        assert state.current is w and w.matched == 1

        apply_keystroke(state, "a", rng)
        assert state.current is w and w.matched == 2

        apply_keystroke(state, "t", rng)
        assert w not in state.words
        assert state.score == score + 3 * (level + 1)
        assert state.words_typed == 1
        assert state.input == ""
        assert state.current is None

    def test_hit_spawns_effect_at_word(self, state, rng):
        """Destroying a word leaves a particle burst where it was."""
        place(state, "dog", x=10, y=4)

        type_text(state, "dog", rng)

        assert len(state.effects) == 1
        particles = state.effects[0].particles
        assert len(particles) == 8 + 2 * 3
        assert {p.y for p in particles} == {4.0}
        assert {p.x for p in particles} == {10.0, 11.0, 12.0}

    def test_matched_equals_buffer_length(self, state, rng):
        """While a word is current its progress matches the buffer."""
        place(state, "fish", y=2)
        for ch in "fis":
            apply_keystroke(state, ch, rng)
            assert state.current.matched == len(state.input)

    def test_first_word_in_spawn_order_wins(self, state, rng):
        """Two candidates: the earlier spawned word is tracked."""
        first = place(state, "cat", y=5)
        place(state, "cab", y=1)

        apply_keystroke(state, "c", rng)

        assert state.current is first

    def test_switching_words_resets_old_progress(self, state, rng):
        """When the prefix moves to another word the first one shows no progress."""
        cat = place(state, "cat", y=5)
        cab = place(state, "cab", y=1)

        type_text(state, "cab", rng)

        assert cat.matched == 0
        assert cab not in state.words
        assert state.words == [cat]

    def test_one_hit_removes_only_that_word(self, state, rng):
        """Identical texts on screen: only the tracked one goes."""
        a = place(state, "dog", x=0, y=3)
        b = place(state, "dog", x=30, y=6)

        type_text(state, "dog", rng)

        assert state.words == [b]
        assert a not in state.words


class TestMiss:
    """Keystrokes that match nothing."""

    def test_miss_clears_buffer(self, state, rng):
        """x with no word starting with x resets input, no score."""
        place(state, "cat", y=1)

        apply_keystroke(state, "x", rng)

        assert state.input == ""
        assert state.current is None
        assert state.score == 0

    def test_miss_discards_progress(self, state, rng):
        """A wrong letter mid-word throws away the progress."""
        w = place(state, "cat", y=1)
        type_text(state, "ca", rng)

        apply_keystroke(state, "x", rng)

        assert state.input == ""
        assert state.current is None
        assert w.matched == 0

    def test_miss_does_not_fall_back(self, state, rng):
        """'cx' misses even if 'x...' is on screen."""
        place(state, "cat", y=1)
        place(state, "xylo", y=2)
        type_text(state, "cx", rng)

        assert state.current is None
        assert state.input == ""

    def test_find_match_none_on_empty_board(self, state):
        state.input = "c"
        assert find_match(state) is None


class TestBackspace:
    """Backspace edits the buffer and forgets the current word."""

    def test_backspace_drops_last_letter(self, state, rng):
        w = place(state, "fish", y=1)
        type_text(state, "fis", rng)

        apply_keystroke(state, BACKSPACE, rng)

        assert state.input == "fi"
        assert state.current is None
        assert w.matched == 0

    def test_backspace_on_empty_buffer(self, state, rng):
        apply_keystroke(state, BACKSPACE, rng)
        assert state.input == ""
        assert state.current is None

    def test_next_letter_rematches(self, state, rng):
        """After backspace the next letter resolves from scratch."""
        w = place(state, "fish", y=1)
        type_text(state, "fix", rng)     # miss
        type_text(state, "fis", rng)
        apply_keystroke(state, BACKSPACE, rng)
        apply_keystroke(state, "s", rng)

        assert state.current is w
        assert w.matched == 3


class TestLevels:
    """Level increases every WORDS_PER_LEVEL hits."""

    def test_level_up_on_multiples(self, state, rng):
        per_level = CONFIG["WORDS_PER_LEVEL"]
        levels = []
        for _ in range(per_level * 3):
            place(state, "cat", y=0)
            type_text(state, "cat", rng)
            levels.append(state.level)

        assert state.words_typed == per_level * 3
        assert state.level == 4
        assert levels[per_level - 2] == 1
        assert levels[per_level - 1] == 2
        assert levels[2 * per_level - 1] == 3

    def test_score_uses_level_at_hit(self, state, rng):
        state.level = 4
        place(state, "fish", y=0)
        type_text(state, "fish", rng)
        assert state.score == 4 * 5


class TestPhases:
    """Keystrokes outside the playing phase."""

    def test_paused_freezes_input(self, state, rng):
        w = place(state, "cat", y=0)
        state.phase = Phase.PAUSED

        type_text(state, "ca", rng)
        apply_keystroke(state, BACKSPACE, rng)

        assert state.input == ""
        assert w.matched == 0

    def test_game_over_ignores_letters(self, state, rng):
        place(state, "cat", y=0)
        state.phase = Phase.GAME_OVER
        type_text(state, "cat", rng)
        assert state.score == 0
        assert len(state.words) == 1

    def test_non_letters_ignored(self, state, rng):
        place(state, "cat", y=0)
        for ch in "C1 !":
            apply_keystroke(state, ch, rng)
        assert state.input == ""
