import io
import os

from portfolio_hub.services.uploads import generate_filename


def test_generate_filename_keeps_extension():
    name = generate_filename('My Photo.PNG')
    assert name.endswith('.png')
    stamp, rest = name.split('-', 1)
    assert stamp.isdigit()
    assert generate_filename('My Photo.PNG') != name


def test_generate_filename_without_extension():
    assert '.' not in generate_filename('README')
    assert '.' not in generate_filename('')


def test_upload_image_stores_file(app, client, tmp_path):
    app.config['UPLOAD_FOLDER'] = str(tmp_path / 'uploads')
    r = client.post('/upload-image',
                    data={'image': (io.BytesIO(b'\x89PNG fake'), 'shot.png')},
                    content_type='multipart/form-data')
    assert r.status_code == 200
    url = r.get_json()['url']
    assert url.startswith('/public/uploads/')
    assert url.endswith('.png')

    stored = tmp_path / 'uploads' / os.path.basename(url)
    assert stored.read_bytes() == b'\x89PNG fake'


def test_upload_image_requires_file(client):
    r = client.post('/upload-image', data={}, content_type='multipart/form-data')
    assert r.status_code == 400
    assert r.get_json() == {'error': 'No image uploaded.'}


def test_generate_filename_keeps_extension_of_non_ascii_name():
    assert generate_filename('사진.png').endswith('.png')
    assert generate_filename('스크린샷 2024.JPEG').endswith('.jpeg')


def test_generate_filename_drops_unsafe_extension():
    name = generate_filename('evil.사진')
    assert '.' not in name


def test_upload_over_size_limit_is_rejected(app, client, tmp_path):
    app.config['UPLOAD_FOLDER'] = str(tmp_path / 'uploads')
    too_big = b'0' * (app.config['MAX_CONTENT_LENGTH'] + 1)
    r = client.post('/upload-image',
                    data={'image': (io.BytesIO(too_big), 'huge.png')},
                    content_type='multipart/form-data')
    assert r.status_code == 413
    assert not (tmp_path / 'uploads').exists()
