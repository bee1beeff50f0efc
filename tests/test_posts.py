"""
Tests for the gallery API — publishing, plays, likes, unpublishing.

Covers:
  - Publish requires an owned, existing project
  - Every public read increments plays
  - Like toggle: liked/unliked round trip, per-user state, counter floor
  - Unpublish removes the post and all of its likes
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope='module')
def app():
    os.environ['SECRET_KEY'] = 'test-secret-key-posts'

    from config import config
    config.DATABASE_PATH = ':memory:'
    config.SQLALCHEMY_DATABASE_URI = 'sqlite://'

    from app import create_app
    application = create_app(testing=True)
    yield application


def _signup(app, name, email):
    client = app.test_client()
    resp = client.post('/api/auth/signup', json={
        'name': name,
        'email': email,
        'password': 'password123',
        'confirm_password': 'password123',
    })
    assert resp.status_code == 201
    client.user_id = resp.get_json()['id']
    return client


@pytest.fixture(scope='module')
def guest(app):
    return app.test_client()


@pytest.fixture(scope='module')
def user_a(app):
    return _signup(app, 'User A', 'a@posts.test')


@pytest.fixture(scope='module')
def user_b(app):
    return _signup(app, 'User B', 'b@posts.test')


@pytest.fixture(scope='module')
def user_c(app):
    return _signup(app, 'User C', 'c@posts.test')


def _publish(client, title='Published', **extra):
    project = client.post('/api/projects', json={
        'type': 'video',
        'title': title,
        'data': '{"preset": "lofi"}',
    }).get_json()['project']
    payload = {'project_id': project['id'], 'title': title}
    payload.update(extra)
    resp = client.post('/api/posts', json=payload)
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()['post']


# ===========================================================================
# Gallery scenario
# ===========================================================================

class TestGalleryScenario:

    def test_publish_read_like_unlike(self, user_a, user_b, guest):
        post = _publish(user_a, 'Scenario')
        assert post['likes'] == 0
        assert post['plays'] == 0
        assert post['owner_id'] == user_a.user_id

        resp = guest.get(f"/api/posts/{post['id']}")
        assert resp.status_code == 200
        assert resp.get_json()['post']['plays'] == 1

        resp = user_b.post(f"/api/posts/{post['id']}/like")
        assert resp.status_code == 200
        assert resp.get_json() == {'liked': True, 'likes': 1}

        resp = user_b.post(f"/api/posts/{post['id']}/like")
        assert resp.get_json() == {'liked': False, 'likes': 0}


# ===========================================================================
# Publishing
# ===========================================================================

class TestPublish:

    def test_optional_fields_stored(self, user_a):
        post = _publish(
            user_a, 'With media',
            description='Night drive', thumbnail='cover.png', media_url='https://cdn.test/v.mp4',
        )
        assert post['description'] == 'Night drive'
        assert post['thumbnail'] == 'cover.png'
        assert post['media_url'] == 'https://cdn.test/v.mp4'
        assert post['owner_name'] == 'User A'

    def test_cannot_publish_someone_elses_project(self, user_a, user_b):
        project = user_a.post('/api/projects', json={
            'type': 'song', 'title': 'Private', 'data': '{}',
        }).get_json()['project']
        resp = user_b.post('/api/posts', json={'project_id': project['id'], 'title': 'Stolen'})
        assert resp.status_code == 403

    def test_missing_project(self, user_a):
        resp = user_a.post('/api/posts', json={'project_id': 'nope', 'title': 'Ghost'})
        assert resp.status_code == 404

    def test_missing_project_id_is_validation_error(self, user_a):
        resp = user_a.post('/api/posts', json={'title': 'No project'})
        assert resp.status_code == 400

    def test_title_rules(self, user_a):
        project = user_a.post('/api/projects', json={
            'type': 'song', 'title': 'T', 'data': '{}',
        }).get_json()['project']
        assert user_a.post('/api/posts', json={'project_id': project['id'], 'title': ''}).status_code == 400
        assert user_a.post('/api/posts', json={
            'project_id': project['id'], 'title': 'x' * 201,
        }).status_code == 400

    def test_listing_newest_first(self, app, guest):
        client = _signup(app, 'Lister', 'lister@posts.test')
        older = _publish(client, 'Older')
        newer = _publish(client, 'Newer')

        ids = [p['id'] for p in guest.get('/api/posts').get_json()['posts']]
        assert ids.index(newer['id']) < ids.index(older['id'])

    def test_listing_does_not_count_plays(self, user_a, guest):
        post = _publish(user_a, 'Listed only')
        guest.get('/api/posts')
        listed = [p for p in guest.get('/api/posts').get_json()['posts'] if p['id'] == post['id']]
        assert listed[0]['plays'] == 0


# ===========================================================================
# Plays
# ===========================================================================

class TestPlays:

    def test_every_read_counts(self, user_a, user_b, guest):
        post = _publish(user_a, 'Counted')
        for expected in range(1, 4):
            assert guest.get(f"/api/posts/{post['id']}").get_json()['post']['plays'] == expected
        assert user_b.get(f"/api/posts/{post['id']}").get_json()['post']['plays'] == 4


# ===========================================================================
# Likes
# ===========================================================================

class TestLikeToggle:

    def test_double_toggle_restores_state(self, user_a, user_b, user_c):
        post = _publish(user_a, 'Round trip')
        user_c.post(f"/api/posts/{post['id']}/like")

        first = user_b.post(f"/api/posts/{post['id']}/like").get_json()
        second = user_b.post(f"/api/posts/{post['id']}/like").get_json()
        third = user_b.post(f"/api/posts/{post['id']}/like").get_json()

        assert first == {'liked': True, 'likes': 2}
        assert second == {'liked': False, 'likes': 1}
        assert third == first

    def test_likes_are_per_user(self, user_a, user_b, user_c):
        post = _publish(user_a, 'Popular')
        assert user_b.post(f"/api/posts/{post['id']}/like").get_json() == {'liked': True, 'likes': 1}
        assert user_c.post(f"/api/posts/{post['id']}/like").get_json() == {'liked': True, 'likes': 2}
        assert user_b.post(f"/api/posts/{post['id']}/like").get_json() == {'liked': False, 'likes': 1}

    def test_owner_can_like_own_post(self, user_a):
        post = _publish(user_a, 'Self love')
        assert user_a.post(f"/api/posts/{post['id']}/like").get_json()['liked'] is True

    def test_like_missing_post(self, user_b):
        assert user_b.post('/api/posts/missing/like').status_code == 404

    def test_counter_never_negative(self, app, user_a, user_b):
        post = _publish(user_a, 'Drifted')
        user_b.post(f"/api/posts/{post['id']}/like")

        # Simulate a counter that drifted to zero while the like row remains
        with app.app_context():
            from app.models import db, Post
            Post.query.get(post['id']).likes = 0
            db.session.commit()

        resp = user_b.post(f"/api/posts/{post['id']}/like").get_json()
        assert resp == {'liked': False, 'likes': 0}

    def test_post_reflects_like_count(self, user_a, user_b, guest):
        post = _publish(user_a, 'Reflected')
        user_b.post(f"/api/posts/{post['id']}/like")
        assert guest.get(f"/api/posts/{post['id']}").get_json()['post']['likes'] == 1


# ===========================================================================
# Unpublish
# ===========================================================================

class TestUnpublish:

    def test_owner_unpublish_cascades_likes(self, app, user_a, user_b, user_c):
        post = _publish(user_a, 'Going away')
        user_b.post(f"/api/posts/{post['id']}/like")
        user_c.post(f"/api/posts/{post['id']}/like")

        resp = user_a.delete(f"/api/posts/{post['id']}")
        assert resp.status_code == 200
        assert resp.get_json() == {'success': True}

        with app.app_context():
            from app.models import Like, AuditLog
            assert Like.query.filter_by(post_id=post['id']).count() == 0
            entry = AuditLog.query.filter_by(action='POST_UNPUBLISH', target_id=post['id']).first()
            assert entry.to_dict()['metadata']['likes_removed'] == 2

        assert user_a.get(f"/api/posts/{post['id']}").status_code == 404

    def test_non_owner_cannot_unpublish(self, user_a, user_b, guest):
        post = _publish(user_a, 'Stays')
        assert user_b.delete(f"/api/posts/{post['id']}").status_code == 403
        assert guest.get(f"/api/posts/{post['id']}").status_code == 200

    def test_unpublish_missing(self, user_a):
        assert user_a.delete('/api/posts/missing').status_code == 404

    def test_unpublish_keeps_project(self, user_a):
        post = _publish(user_a, 'Project stays')
        user_a.delete(f"/api/posts/{post['id']}")
        assert user_a.get(f"/api/projects/{post['project_id']}").status_code == 200
