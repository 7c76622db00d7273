import generator


def test_batch_boards_are_distinct():
    puzzles = generator.generate_batch(6, 3, 42, "organic", "normal", 1000, False)
    assert len(puzzles) == 3
    assert len({puzzle.fingerprint for puzzle in puzzles}) == 3


def test_batch_is_reproducible():
    first = generator.generate_batch(6, 2, 8, "shape_template", "normal", 1000, False)
    second = generator.generate_batch(6, 2, 8, "shape_template", "normal", 1000, False)
    assert [p.fingerprint for p in first] == [p.fingerprint for p in second]


def test_main_prints_each_board(capsys):
    assert generator.main(["6", "--count", "2", "--seed", "4"]) == 0
    out = capsys.readouterr().out
    assert "Board #1" in out
    assert "Board #2" in out
    assert "Seed:" in out


def test_main_rejects_bad_sizes(capsys):
    assert generator.main(["40"]) == 2
    assert "between" in capsys.readouterr().out


def test_main_reports_exhaustion(capsys):
    assert generator.main(["3", "--seed", "1", "--max-attempts", "3"]) == 1
    assert "Generation failed" in capsys.readouterr().out
