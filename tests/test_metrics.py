from mis_engine.metrics import deviation_pct, rate_pct, round2, round_half_away


def test_round2_half_away_from_zero():
    assert round2(-33.333333333333336) == -33.33
    assert round2(1.005) == 1.01
    assert round2(-1.005) == -1.01
    assert round2(2.675) == 2.68
    assert round2(-0.001) == 0.0


def test_round_half_away_whole_and_one_decimal():
    assert round_half_away(2.5) == 3.0
    assert round_half_away(-2.5) == -3.0
    assert round_half_away(2.25, 1) == 2.3


def test_zero_denominators():
    assert deviation_pct(0, 0) == 0.0
    assert rate_pct(0, 0) == 0


def test_percentages():
    assert deviation_pct(3, 4) == -25.0
    assert deviation_pct(4, 4) == 0.0
    assert rate_pct(2, 3) == 67
    assert rate_pct(1, 8) == 13
