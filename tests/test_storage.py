import io
import os

from werkzeug.datastructures import FileStorage

from catalog.storage import storage


def _upload(name="photo.png", content=b"png"):
    return FileStorage(io.BytesIO(content), filename=name)


def test_save_names_file_after_field_and_time(app, monkeypatch):
    monkeypatch.setattr("catalog.storage.time.time", lambda: 1700000000.5)
    with app.app_context():
        path = storage.save(_upload(), "productImage")
        assert path == "uploads/productImage-1700000000500.png"
        assert os.path.exists(storage.path_for(path))


def test_save_never_overwrites(app, monkeypatch):
    monkeypatch.setattr("catalog.storage.time.time", lambda: 5.0)
    with app.app_context():
        first = storage.save(_upload(content=b"one"), "productImage")
        second = storage.save(_upload(content=b"two"), "productImage")
        assert first != second
        with open(storage.path_for(first), "rb") as f:
            assert f.read() == b"one"


def test_save_without_extension(app):
    with app.app_context():
        path = storage.save(_upload(name="blob"), "productImage")
        assert os.path.splitext(path)[1] == ""


def test_get_url_and_path_for(app):
    with app.app_context():
        assert storage.get_url("uploads/productImage-1.jpg") == "/uploads/productImage-1.jpg"
        assert storage.get_url("") == ""
        # stored paths cannot point outside the upload folder
        assert storage.path_for("../../etc/passwd") == os.path.join(
            app.config["UPLOAD_FOLDER"], "passwd"
        )


def test_delete_missing_is_tolerated(app):
    with app.app_context():
        storage.delete("uploads/productImage-404.jpg")
        storage.delete("")
        storage.delete(None)
