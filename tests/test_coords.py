from teilens.coords import CoordinateRun, decode_coords, decode_run


def test_single_run() -> None:
    assert decode_coords("1,72.0,700.5,400.0,20.0") == [CoordinateRun(1, 72.0, 700.5, 400.0, 20.0)]


def test_multiple_runs_keep_order() -> None:
    runs = decode_coords("1,10,10,5,5;2,20,20,5,5")
    assert [r.page for r in runs] == [1, 2]
    assert runs[1] == CoordinateRun(2, 20.0, 20.0, 5.0, 5.0)


def test_non_numeric_page_gives_nothing() -> None:
    assert decode_coords("abc,1,2,3,4") == []


def test_one_bad_run_does_not_drop_siblings() -> None:
    runs = decode_coords("1,1,1,1,1;1,2,x,2,2;3,3,3,3,3;4,4,4,4,4")
    assert [r.page for r in runs] == [1, 3, 4]


def test_page_is_floored_and_extra_fields_ignored() -> None:
    run = decode_run("2.9,1,2,3,4,11.5,foo")
    assert run is None  # every field must be numeric
    run = decode_run("2.9,1,2,3,4,11.5")
    assert run == CoordinateRun(2, 1.0, 2.0, 3.0, 4.0)
    assert isinstance(run.page, int)


def test_whitespace_and_exponents() -> None:
    assert decode_run(" 1 , 1e2 ,  .5, 3.,4 ") == CoordinateRun(1, 100.0, 0.5, 3.0, 4.0)


def test_negative_sizes_are_kept() -> None:
    assert decode_run("1,5,5,-3,-4") == CoordinateRun(1, 5.0, 5.0, -3.0, -4.0)


def test_invalid_runs() -> None:
    assert decode_run("1,2,3,4") is None
    assert decode_run("1,2,3,4,nan") is None
    assert decode_run("1,2,3,4,inf") is None
    assert decode_run("1,2,3,4,5x") is None
    assert decode_run("1,2,3,4,5,") is None
    assert decode_run("") is None


def test_empty_and_trailing_separator() -> None:
    assert decode_coords(None) == []
    assert decode_coords("") == []
    assert len(decode_coords("1,2,3,4,5;")) == 1
