from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

ROLE_USER = 'user'
ROLE_ADMIN = 'admin'


class User(db.Model):
    username = db.Column(db.String(80), primary_key=True)
    password = db.Column(db.String(128), nullable=False)  # stored verbatim
    role = db.Column(db.String(10), nullable=False, default=ROLE_USER)  # 'user' or 'admin'


class LoginSession(db.Model):
    id = db.Column(db.String(64), primary_key=True)
    username = db.Column(db.String(80), nullable=False)
    role = db.Column(db.String(10), nullable=False)  # role at login time
    created_at = db.Column(db.DateTime, default=db.func.now())
