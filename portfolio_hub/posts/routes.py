"""
Posts Routes

Public pages readable by anyone.
"""

from flask import render_template, request, jsonify, current_app
from portfolio_hub.posts import posts_bp
from portfolio_hub.services import list_posts, get_post, save_image


@posts_bp.route('/')
def index():
    """Listing of all posts, newest first"""
    posts = list_posts()
    return render_template('posts/index.html', title='Portfolio Hub', posts=posts)


@posts_bp.route('/post/<int:post_id>')
def post_detail(post_id):
    """Single post page"""
    post = get_post(post_id)
    return render_template('posts/post_detail.html', title=post.title or '', post=post)


@posts_bp.route('/upload-image', methods=['POST'])
def upload_image():
    """Store an editor image and return its URL"""
    image = request.files.get('image')
    if image is None or not image.filename:
        return jsonify({'error': 'No image uploaded.'}), 400

    url = save_image(image, current_app.config['UPLOAD_FOLDER'])
    return jsonify({'url': url})
