"""
Many-to-many join tables.

Every join table has two integer columns, "A" and "B". "A" references the
alphabetically-first model of the pair, so the owner column differs from
table to table (e.g. `_Post_tags.A` is the post but `_Post_writers.B` is).
`_Post_relateds` links posts to posts; both columns are owners.
"""

from sqlalchemy import Table, Column, Integer, ForeignKey

from database.base import Base
from database.enums import ContactRole


def _join_table(name: str, a_table: str, b_table: str) -> Table:
    return Table(
        name,
        Base.metadata,
        Column('A', Integer, ForeignKey(f'{a_table}.id'), nullable=False, index=True),
        Column('B', Integer, ForeignKey(f'{b_table}.id'), nullable=False, index=True),
    )


post_sections = _join_table('_Post_sections', 'Post', 'Section')
category_posts = _join_table('_Category_posts', 'Category', 'Post')
category_sections = _join_table('_Category_sections', 'Category', 'Section')
post_tags = _join_table('_Post_tags', 'Post', 'Tag')
post_tags_algo = _join_table('_Post_tags_algo', 'Post', 'Tag')
post_relateds = _join_table('_Post_relateds', 'Post', 'Post')
external_tags = _join_table('_External_tags', 'External', 'Tag')
# Topic tables predate the naming convention; the topic is "A"
topic_tags = _join_table('Tag_topics', 'Topic', 'Tag')
topic_slideshow_images = _join_table('Topic_slideshow_images', 'Topic', 'Image')

# Contact is "A", Post is "B"
post_contacts = {
    role: _join_table(f'_Post_{role.value}', 'Contact', 'Post')
    for role in ContactRole
}
