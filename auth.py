from functools import wraps

from flask import (
    Blueprint,
    render_template,
    redirect,
    url_for,
    flash,
    session,
    current_app,
)
from forms import LoginForm
from models import User, db
from sqlalchemy import func

auth_bp = Blueprint('auth', __name__)


def authenticate(email, password):
    """Return the verified user matching ``email``/``password`` or ``None``."""
    email = (email or '').strip().lower()
    if not email or not password:
        return None
    user = User.query.filter(func.lower(User.email) == email).first()
    if not user or not user.check_password(password):
        return None
    if not user.is_verified:
        current_app.logger.info('LOGIN_UNVERIFIED email=%s', email)
        return None
    return user


def login_required(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        if 'user_id' not in session or db.session.get(User, session['user_id']) is None:
            session.clear()
            return redirect(url_for('auth.login'))
        return f(*args, **kwargs)
    return wrapper


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    form = LoginForm()
    if form.validate_on_submit():
        user = authenticate(form.email.data, form.password.data)
        if user:
            session.clear()
            session['user_id'] = user.id
            session['name'] = user.name
            current_app.logger.info('LOGIN_SUCCESS user_id=%s', user.id)
            return redirect(url_for('content.admin_contacts'))
        current_app.logger.info('LOGIN_FAILED email=%s', (form.email.data or '').strip().lower())
        flash('Invalid credentials', 'login')
    return render_template('login.html', form=form)


@auth_bp.route('/logout')
def logout():
    current_app.logger.info('LOGOUT user_id=%s', session.get('user_id'))
    session.clear()
    return redirect(url_for('auth.login'))
