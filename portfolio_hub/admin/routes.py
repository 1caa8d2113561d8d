"""
Admin Routes

Every view here is wrapped by admin_required.
"""

from flask import render_template, request, redirect, url_for
from portfolio_hub.admin import admin_bp
from portfolio_hub.admin.decorators import admin_required
from portfolio_hub.services import get_post, create_post, update_post, delete_post

POST_FIELDS = ('title', 'summary', 'content', 'link_url')


def _post_form_values():
    """Read the post fields from the submitted form; missing ones become None."""
    return {field: request.form.get(field) for field in POST_FIELDS}


@admin_bp.route('/write', methods=['GET', 'POST'])
@admin_required
def write_post():
    """Create form and creation handler."""
    if request.method == 'POST':
        create_post(**_post_form_values())
        return redirect(url_for('posts.index'))

    empty = dict.fromkeys(POST_FIELDS, '')
    return render_template('admin/post_form.html',
                           title='New Portfolio Post',
                           mode='create',
                           post=empty)


@admin_bp.route('/edit/<int:post_id>', methods=['GET', 'POST'])
@admin_required
def edit_post(post_id):
    """Edit form and update handler."""
    if request.method == 'POST':
        update_post(post_id, **_post_form_values())
        return redirect(url_for('posts.post_detail', post_id=post_id))

    post = get_post(post_id)
    return render_template('admin/post_form.html',
                           title='Edit Portfolio Post',
                           mode='edit',
                           post=post)


@admin_bp.route('/delete/<int:post_id>', methods=['POST'])
@admin_required
def remove_post(post_id):
    """Delete a post and return to the listing."""
    delete_post(post_id)
    return redirect(url_for('posts.index'))
