from tests.fakes.fake_vault import FakeVault

__all__ = ["FakeVault"]
