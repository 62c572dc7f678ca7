"""
Pages Routes
"""

from flask import render_template
from flask_login import login_required

from loginapp.pages import pages_bp


@pages_bp.route('/')
def index():
    """Application home"""
    return render_template('pages/index.html')


@pages_bp.route('/pages/secret')
@login_required
def secret():
    return render_template('pages/secret.html')
