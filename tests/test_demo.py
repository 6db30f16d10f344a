from cursorlist.demo import Movie, main


def test_main_prints_movies(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == "2046 (2004)\nArrival (2016)\n"


def test_main_without_arguments(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("2046")
    assert len(lines) == 2


def test_movie_fields():
    movie = Movie(2016, "Arrival", "Denis Villeneuve ")
    assert movie.year == 2016
    assert movie.title == "Arrival"
    assert movie.director == "Denis Villeneuve "