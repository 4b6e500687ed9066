from bookinstance_catalog.models import Book, BookInstance


def test_init_db_seeds_sample_copies(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["init-db"])
    assert result.exit_code == 0
    assert "Initialized DB with sample data." in result.output

    with app.app_context():
        assert Book.query.count() == 2
        assert BookInstance.query.count() == 3


def test_init_db_twice_keeps_existing_data(app):
    runner = app.test_cli_runner()
    runner.invoke(args=["init-db"])

    result = runner.invoke(args=["init-db"])
    assert result.exit_code == 0
    assert "DB already initialized." in result.output

    with app.app_context():
        assert BookInstance.query.count() == 3
