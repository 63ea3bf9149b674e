import math

from ...core.database import db, generate_id, isoformat, PublishableMixin, TimestampMixin

WORDS_PER_MINUTE = 200


def estimate_read_time(content):
    """Minutes to read `content`, never less than one."""
    words = len((content or '').split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


class BlogPost(PublishableMixin, TimestampMixin, db.Model):
    __tablename__ = 'blog_posts'

    id = db.Column(db.String(64), primary_key=True, default=generate_id)
    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False)
    excerpt = db.Column(db.Text)
    content = db.Column(db.Text, nullable=False)
    featured_image = db.Column(db.String(512))
    tags = db.Column(db.JSON, nullable=False, default=list)
    category = db.Column(db.String(255), index=True)
    read_time = db.Column(db.Integer)
    views = db.Column(db.Integer, nullable=False, default=0)
    featured = db.Column(db.Boolean, nullable=False, default=False)
    published = db.Column(db.Boolean, nullable=False, default=False)
    meta_title = db.Column(db.String(255))
    meta_description = db.Column(db.Text)
    og_image = db.Column(db.String(512))
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    author_id = db.Column(db.String(64), db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)

    author = db.relationship('User', lazy='joined')

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'slug': self.slug,
            'excerpt': self.excerpt,
            'content': self.content,
            'featuredImage': self.featured_image,
            'tags': self.tags or [],
            'category': self.category,
            'readTime': self.read_time,
            'views': self.views,
            'featured': self.featured,
            'published': self.published,
            'publishedAt': isoformat(self.published_at),
            'metaTitle': self.meta_title,
            'metaDescription': self.meta_description,
            'ogImage': self.og_image,
            'sortOrder': self.sort_order,
            'authorId': self.author_id,
            'author': self.author.summary(with_email=True) if self.author else None,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }

    def __repr__(self):
        return f'<BlogPost {self.slug}>'
