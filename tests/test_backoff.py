import pytest

from voicenote.transcription.backoff import compute_delay, parse_retry_after


# ── compute_delay ─────────────────────────────────────────────────────────────


@pytest.mark.parametrize("attempt, expected", [(1, 2.0), (2, 4.0), (3, 8.0)])
def test_exponential_delay_without_jitter(attempt, expected):
    assert compute_delay(attempt, rng=lambda: 0.5) == expected


def test_retry_after_overrides_exponential_delay():
    assert compute_delay(3, retry_after=5, rng=lambda: 0.5) == 5.0


def test_jitter_lower_bound_is_minus_30_percent():
    assert compute_delay(1, rng=lambda: 0.0) == pytest.approx(1.4)


def test_jitter_upper_bound_approaches_plus_30_percent():
    assert compute_delay(1, rng=lambda: 0.999999) == pytest.approx(2.6, abs=1e-4)


def test_jitter_applies_to_retry_after():
    assert compute_delay(1, retry_after=10, rng=lambda: 1.0) == pytest.approx(13.0)


def test_zero_retry_after_gives_zero_delay():
    assert compute_delay(1, retry_after=0) == 0.0


def test_random_delays_stay_within_bounds():
    delays = [compute_delay(2) for _ in range(200)]
    assert all(2.8 <= d <= 5.2 for d in delays)


# ── parse_retry_after ─────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("15", 15),
        (" 3 ", 3),
        ("0", 0),
        (None, None),
        ("", None),
        ("soon", None),
        ("1.5", None),
        ("-2", None),
        ("Wed, 21 Oct 2015 07:28:00 GMT", None),
    ],
)
def test_parse_retry_after(raw, expected):
    assert parse_retry_after(raw) == expected
