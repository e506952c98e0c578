"""Tests for the credential store, principal resolution and the login/registration flow."""

import os
import tempfile
import threading
import unittest
from unittest.mock import patch

from support import add_user, make_session_factory

from electroleed.core.errors import DuplicateLogin, NotFound, Unauthorized, UserNotFound
from electroleed.core.security import verify_password
from electroleed.core.tokens import verify_access_token
from electroleed.models import Employee, Role, User
from electroleed.services.auth import INVALID_CREDENTIALS_MESSAGE, authenticate, register
from electroleed.services.credentials import CredentialStore
from electroleed.services.principal import resolve_principal


class StoreTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.Session = make_session_factory()
        self.session = self.Session()
        self.store = CredentialStore(self.session)

    def tearDown(self) -> None:
        self.session.close()


class TestLookup(StoreTestCase):
    """find_by_login / exists_by_login."""

    def test_find_existing(self) -> None:
        add_user(self.session, "alice", "secret", Role.ADMIN)
        user = self.store.find_by_login("alice")
        self.assertIsNotNone(user)
        self.assertEqual(user.role, Role.ADMIN)
        self.assertTrue(self.store.exists_by_login("alice"))

    def test_find_absent(self) -> None:
        self.assertIsNone(self.store.find_by_login("nobody"))
        self.assertFalse(self.store.exists_by_login("nobody"))

    def test_login_is_case_sensitive(self) -> None:
        add_user(self.session, "alice", "secret", Role.ADMIN)
        self.assertFalse(self.store.exists_by_login("Alice"))


class TestSave(StoreTestCase):
    """save/create insert accounts and reject duplicate logins."""

    def test_create_hashes_password(self) -> None:
        user = self.store.create("bob", "hunter22", Role.SCHEDULER)
        self.assertIsNotNone(user.id)
        self.assertNotEqual(user.password_hash, "hunter22")
        self.assertTrue(verify_password("hunter22", user.password_hash))

    def test_duplicate_login(self) -> None:
        self.store.create("bob", "hunter22", Role.SCHEDULER)
        with self.assertRaises(DuplicateLogin):
            self.store.create("bob", "other-pass", Role.ADMIN)
        self.assertEqual(self.session.query(User).count(), 1)

    def test_unique_constraint_is_the_final_guard(self) -> None:
        """A racing insert that passed the existence check still fails with DuplicateLogin."""
        add_user(self.session, "bob", "secret", Role.SCHEDULER)
        with patch.object(CredentialStore, "exists_by_login", return_value=False):
            with self.assertRaises(DuplicateLogin):
                self.store.save(User(login="bob", password_hash="x", role=Role.ADMIN))
        # Session is usable again after the rollback.
        self.assertEqual(self.session.query(User).filter(User.login == "bob").count(), 1)


class TestConcurrentRegistration(unittest.TestCase):
    """At most one of several simultaneous registrations of one login succeeds."""

    def test_only_one_wins(self) -> None:
        fd, path = tempfile.mkstemp(suffix=".db")
        os.close(fd)
        self.addCleanup(os.remove, path)
        Session = make_session_factory(f"sqlite:///{path}")
        barrier = threading.Barrier(4)
        outcomes: list[str] = []
        lock = threading.Lock()

        def attempt() -> None:
            session = Session()
            try:
                barrier.wait()
                CredentialStore(session).save(
                    User(login="carol", password_hash="x", role=Role.ESTIMATOR)
                )
                result = "ok"
            except DuplicateLogin:
                result = "duplicate"
            finally:
                session.close()
            with lock:
                outcomes.append(result)

        threads = [threading.Thread(target=attempt) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(outcomes.count("ok"), 1)
        self.assertEqual(outcomes.count("duplicate"), 3)
        check = Session()
        try:
            self.assertEqual(check.query(User).filter(User.login == "carol").count(), 1)
        finally:
            check.close()


class TestDelete(StoreTestCase):
    """delete removes the account and cascades to its employee profile."""

    def test_delete_absent(self) -> None:
        with self.assertRaises(NotFound):
            self.store.delete("ghost")

    def test_delete_cascades_to_employee(self) -> None:
        user = add_user(self.session, "dave", "secret", Role.PROJECT_MEMBER)
        self.session.add(Employee(full_name="Dave D.", position="Electrician", account_id=user.id))
        self.session.commit()

        self.store.delete("dave")

        self.assertIsNone(self.store.find_by_login("dave"))
        self.assertEqual(self.session.query(Employee).count(), 0)


class TestUpdateAndList(StoreTestCase):
    """update changes role/password/login; list_users filters and sorts."""

    def setUp(self) -> None:
        super().setUp()
        add_user(self.session, "alice", "secret", Role.ADMIN)
        add_user(self.session, "bob", "secret", Role.SCHEDULER)
        add_user(self.session, "carol", "secret", Role.ESTIMATOR)

    def test_update_role_and_password(self) -> None:
        bob = self.store.find_by_login("bob")
        updated = self.store.update(bob.id, role=Role.PROJECT_MANAGER, password="new-pass")
        self.assertEqual(updated.role, Role.PROJECT_MANAGER)
        self.assertTrue(verify_password("new-pass", updated.password_hash))

    def test_update_to_taken_login(self) -> None:
        bob = self.store.find_by_login("bob")
        with self.assertRaises(DuplicateLogin):
            self.store.update(bob.id, login="alice")

    def test_update_absent(self) -> None:
        with self.assertRaises(NotFound):
            self.store.update(999, role=Role.ADMIN)

    def test_list_default_order(self) -> None:
        self.assertEqual([u.login for u in self.store.list_users()], ["alice", "bob", "carol"])

    def test_list_sorted(self) -> None:
        logins = [u.login for u in self.store.list_users(sort="login", order="desc")]
        self.assertEqual(logins, ["carol", "bob", "alice"])
        roles = [u.role for u in self.store.list_users(sort="role")]
        self.assertEqual(roles, [Role.ADMIN, Role.ESTIMATOR, Role.SCHEDULER])

    def test_list_keyword_matches_login_or_role(self) -> None:
        self.assertEqual([u.login for u in self.store.list_users(keyword="car")], ["carol"])
        self.assertEqual([u.login for u in self.store.list_users(keyword="sched")], ["bob"])
        self.assertEqual(self.store.list_users(keyword="zzz"), [])

    def test_list_keyword_wildcards_match_literally(self) -> None:
        self.assertEqual(self.store.list_users(keyword="_"), [])
        self.assertEqual(self.store.list_users(keyword="%"), [])
        add_user(self.session, "a_b", "secret", Role.ADMIN)
        add_user(self.session, "100%", "secret", Role.ADMIN)
        self.assertEqual([u.login for u in self.store.list_users(keyword="_")], ["a_b"])
        self.assertEqual([u.login for u in self.store.list_users(keyword="%")], ["100%"])


class TestResolvePrincipal(StoreTestCase):
    """resolve_principal maps the stored role to one authority."""

    def test_resolve(self) -> None:
        add_user(self.session, "erin", "secret", Role.PROJECT_MANAGER)
        principal = resolve_principal(self.store, "erin")
        self.assertEqual(principal.login, "erin")
        self.assertEqual(principal.role, Role.PROJECT_MANAGER)
        self.assertEqual(principal.authorities, ["ROLE_PROJECT_MANAGER"])

    def test_unknown_login(self) -> None:
        with self.assertRaises(UserNotFound):
            resolve_principal(self.store, "nobody")


class TestAuthenticate(StoreTestCase):
    """authenticate checks credentials and issues a token."""

    def setUp(self) -> None:
        super().setUp()
        add_user(self.session, "alice", "secret", Role.ADMIN)

    def test_success(self) -> None:
        result = authenticate(self.store, "alice", "secret")
        self.assertEqual(result.role, Role.ADMIN)
        info = verify_access_token(result.token)
        self.assertEqual((info.login, info.role), ("alice", "ADMIN"))

    def test_wrong_password_and_unknown_login_look_the_same(self) -> None:
        with self.assertRaises(Unauthorized) as wrong:
            authenticate(self.store, "alice", "wrong")
        with self.assertRaises(Unauthorized) as absent:
            authenticate(self.store, "mallory", "secret")
        self.assertEqual(wrong.exception.message, INVALID_CREDENTIALS_MESSAGE)
        self.assertEqual(absent.exception.message, INVALID_CREDENTIALS_MESSAGE)
        self.assertEqual(type(wrong.exception), type(absent.exception))

    def test_requested_role_goes_into_token_only(self) -> None:
        result = authenticate(self.store, "alice", "secret", Role.ESTIMATOR)
        self.assertEqual(result.role, Role.ADMIN)
        self.assertEqual(verify_access_token(result.token).role, "ESTIMATOR")


class TestRegister(StoreTestCase):
    """register stores the account and returns a token for it."""

    def test_register(self) -> None:
        token = register(self.store, "frank", "secret1", Role.SCHEDULER)
        info = verify_access_token(token)
        self.assertEqual((info.login, info.role), ("frank", "SCHEDULER"))
        self.assertTrue(self.store.exists_by_login("frank"))

    def test_register_taken_login(self) -> None:
        register(self.store, "frank", "secret1", Role.SCHEDULER)
        with self.assertRaises(DuplicateLogin):
            register(self.store, "frank", "secret2", Role.ADMIN)


if __name__ == "__main__":
    unittest.main()
