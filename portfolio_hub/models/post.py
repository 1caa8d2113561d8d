"""
Portfolio Post Model
"""

from datetime import datetime

from portfolio_hub.extensions import db


class Post(db.Model):
    """A portfolio entry shown on the public listing"""
    __tablename__ = 'portfolio_posts'
    # Never hand out the id of a deleted row again
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255))
    summary = db.Column(db.String(500))
    content = db.Column(db.Text)
    link_url = db.Column(db.String(500))
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    def __repr__(self):
        return f'<Post {self.id} {self.title!r}>'
