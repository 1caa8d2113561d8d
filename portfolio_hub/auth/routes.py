"""
Auth Routes

Shared-password admin login, guest mode and logout.
"""

from flask import render_template, request, redirect, url_for, flash, session, current_app
from portfolio_hub.auth import auth_bp


def _gate():
    return current_app.extensions['admin_gate']


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login form and password check"""
    if request.method == 'POST':
        password = request.form.get('password', '')

        if _gate().login(session, password):
            return redirect(url_for('posts.index'))

        flash('Incorrect password.', 'danger')

    return render_template('auth/login.html', title='Admin Login')


@auth_bp.route('/guest', methods=['POST'])
def guest():
    """Browse as a guest (explicitly not admin)"""
    _gate().enter_guest_mode(session)
    return redirect(url_for('posts.index'))


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Logout - clears entire session."""
    _gate().logout(session)
    return redirect(url_for('posts.index'))
