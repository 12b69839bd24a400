import os
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest import mock

from ringbot.errors import ConfigurationError, UserRecoverableError
from ringbot.models import DaoRole
from ringbot.roles import resolve_dao_role
from ringbot.settings import load_ring_settings
from ringbot.utils import int_from_env, parse_snowflake, path_from_env, require_env

ROLE_IDS = {
    DaoRole.FRENS: 111,
    DaoRole.REGULARS: 222,
    DaoRole.DAOISTS: 333,
}

ENVIRONMENT = {
    "DAO_ROLE_FREN": "111",
    "DAO_ROLE_REGULAR": "222",
    "DAO_ROLE_DAOIST": "333",
    "CHAOSRING_FRENS": "assets/ring_frens.png",
    "CHAOSRING_REGULARS": "assets/ring_regulars.png",
    "CHAOSRING_DAOISTS": "assets/ring_daoists.png",
}


def member_with_roles(*role_ids: int) -> SimpleNamespace:
    return SimpleNamespace(id=42, roles=[SimpleNamespace(id=role_id) for role_id in role_ids])


class ResolveDaoRoleTests(unittest.TestCase):
    def test_single_role_is_resolved(self) -> None:
        self.assertEqual(resolve_dao_role(member_with_roles(111), ROLE_IDS), DaoRole.FRENS)
        self.assertEqual(resolve_dao_role(member_with_roles(222), ROLE_IDS), DaoRole.REGULARS)
        self.assertEqual(resolve_dao_role(member_with_roles(333), ROLE_IDS), DaoRole.DAOISTS)

    def test_highest_tier_wins(self) -> None:
        self.assertEqual(resolve_dao_role(member_with_roles(111, 333, 222), ROLE_IDS), DaoRole.DAOISTS)
        self.assertEqual(resolve_dao_role(member_with_roles(999, 111, 222), ROLE_IDS), DaoRole.REGULARS)

    def test_member_without_dao_role_is_rejected(self) -> None:
        with self.assertRaises(UserRecoverableError) as ctx:
            resolve_dao_role(member_with_roles(999), ROLE_IDS)
        self.assertEqual(
            str(ctx.exception),
            "Error while preparing an avatar: User is not a DAOist, regular or fren",
        )
        self.assertEqual(ctx.exception.reason, "User is not a DAOist, regular or fren")

    def test_member_without_roles_attribute_is_rejected(self) -> None:
        with self.assertRaises(UserRecoverableError):
            resolve_dao_role(SimpleNamespace(id=1), ROLE_IDS)


class LoadRingSettingsTests(unittest.TestCase):
    def test_complete_environment_is_loaded(self) -> None:
        settings = load_ring_settings(ENVIRONMENT)
        self.assertEqual(settings.role_ids, ROLE_IDS)
        self.assertEqual(settings.ring_path_for(DaoRole.REGULARS), Path("assets/ring_regulars.png"))

    def test_missing_variable_is_named(self) -> None:
        environ = dict(ENVIRONMENT)
        del environ["CHAOSRING_DAOISTS"]
        with self.assertRaises(ConfigurationError) as ctx:
            load_ring_settings(environ)
        self.assertIn("CHAOSRING_DAOISTS", str(ctx.exception))

    def test_blank_ring_path_is_rejected(self) -> None:
        environ = dict(ENVIRONMENT, CHAOSRING_FRENS="   ")
        with self.assertRaises(ConfigurationError) as ctx:
            load_ring_settings(environ)
        self.assertIn("CHAOSRING_FRENS", str(ctx.exception))

    def test_invalid_role_id_is_rejected(self) -> None:
        environ = dict(ENVIRONMENT, DAO_ROLE_REGULAR="regulars")
        with self.assertRaises(ConfigurationError) as ctx:
            load_ring_settings(environ)
        self.assertIn("DAO_ROLE_REGULAR", str(ctx.exception))

    def test_process_environment_is_the_default_source(self) -> None:
        with mock.patch.dict(os.environ, ENVIRONMENT, clear=True):
            settings = load_ring_settings()
        self.assertEqual(settings.role_ids[DaoRole.FRENS], 111)


class EnvironmentHelperTests(unittest.TestCase):
    def test_blank_value_counts_as_missing(self) -> None:
        with self.assertRaises(ConfigurationError):
            require_env("GUILD_ID", {"GUILD_ID": "   "})
        self.assertEqual(require_env("GUILD_ID", {"GUILD_ID": " 123 "}), "123")

    def test_snowflake_must_be_positive_integer(self) -> None:
        self.assertEqual(parse_snowflake("GUILD_ID", "987654321"), 987654321)
        with self.assertRaises(ConfigurationError):
            parse_snowflake("GUILD_ID", "0")
        with self.assertRaises(ConfigurationError):
            parse_snowflake("GUILD_ID", "abc")

    def test_path_from_env_expands_home_and_skips_blank(self) -> None:
        path = path_from_env("CHAOSRING_FRENS", {"CHAOSRING_FRENS": " ~/rings/frens.png "})
        self.assertEqual(path, Path("~/rings/frens.png").expanduser())
        self.assertIsNone(path_from_env("CHAOSRING_FRENS", {"CHAOSRING_FRENS": "  "}))
        self.assertIsNone(path_from_env("CHAOSRING_FRENS", {}))

    def test_int_from_env_falls_back_on_garbage(self) -> None:
        with mock.patch.dict(os.environ, {"RINGBOT_TEST_INT": "ten"}):
            with self.assertLogs("ringbot.utils", level="WARNING"):
                self.assertEqual(int_from_env("RINGBOT_TEST_INT", 10), 10)
        with mock.patch.dict(os.environ, {"RINGBOT_TEST_INT": "7"}):
            self.assertEqual(int_from_env("RINGBOT_TEST_INT", 10), 7)


if __name__ == "__main__":
    unittest.main()
