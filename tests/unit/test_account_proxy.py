"""
Unit tests for AccountProxy and chains of account proxies.

Tests cover:
- Forwarding of balance, deposit, withdraw
- Chains of any depth return exactly what the real account returns
- Subject errors propagate unchanged
- Construction guards
"""

import pytest

from surrogate.core.exceptions import ValidationError
from surrogate.domain.models import BankAccount
from surrogate.proxies import (
    AccountProxy,
    AccountProtectionProxy,
    DynamicProxy,
    VirtualAccountProxy,
)


class ExplodingAccount:
    """Account whose withdraw always fails."""

    class Overdrawn(Exception):
        pass

    def balance(self) -> int:
        return 0

    def deposit(self, amount: int) -> None:
        return None

    def withdraw(self, amount: int) -> None:
        raise self.Overdrawn(f"cannot withdraw {amount}")


def _owned_by_alice(subject):
    return AccountProtectionProxy(subject, "alice", identity_source=lambda: "alice")


def _virtual_over(subject):
    return VirtualAccountProxy(0, factory=lambda _: subject)


CHAIN_LAYERS = {
    "proxy": AccountProxy,
    "protection": _owned_by_alice,
    "virtual": _virtual_over,
    "dynamic": DynamicProxy,
}


def build_chain(real_account, layer_names):
    subject = real_account
    for name in layer_names:
        subject = CHAIN_LAYERS[name](subject)
    return subject


# =============================================================================
# FORWARDING TESTS
# =============================================================================


class TestAccountProxy:
    """Tests for the pass-through proxy."""

    def test_deposit_10_dollars(self, account: BankAccount):
        proxy = AccountProxy(account)
        proxy.deposit(10)
        assert proxy.balance() == 110
        assert account.balance() == 110

    def test_withdraw_10_dollars(self, account: BankAccount):
        proxy = AccountProxy(account)
        proxy.withdraw(10)
        assert proxy.balance() == 90

    def test_subject_is_exposed_read_only(self, account: BankAccount):
        proxy = AccountProxy(account)
        assert proxy.subject is account
        with pytest.raises(AttributeError):
            proxy.subject = BankAccount(0)

    def test_none_subject_rejected(self):
        with pytest.raises(ValidationError):
            AccountProxy(None)

    def test_subject_error_propagates_unchanged(self):
        """
        GIVEN a proxy around an account whose withdraw raises
        WHEN I withdraw through the proxy
        THEN the very same exception type and message reach me
        """
        proxy = AccountProxy(AccountProxy(ExplodingAccount()))

        with pytest.raises(ExplodingAccount.Overdrawn, match="cannot withdraw 5"):
            proxy.withdraw(5)

    def test_shared_account_seen_by_every_chain(self, account: BankAccount):
        first = AccountProxy(account)
        second = AccountProxy(AccountProxy(account))

        first.deposit(10)
        second.withdraw(30)

        assert first.balance() == second.balance() == account.balance() == 80


# =============================================================================
# CHAIN IDENTITY TESTS
# =============================================================================


class TestChainIdentity:
    """Forwarding through any chain returns exactly the real account's result."""

    @pytest.mark.parametrize(
        "layers",
        [
            ["proxy"],
            ["proxy", "proxy", "proxy"],
            ["protection", "proxy"],
            ["virtual", "protection"],
            ["dynamic", "proxy", "dynamic"],
            ["proxy", "virtual", "dynamic", "protection", "proxy"],
        ],
    )
    def test_chain_matches_real_account(self, layers):
        real_account = BankAccount(100)
        chain = build_chain(real_account, layers)

        chain.deposit(25)
        chain.withdraw(5)

        assert chain.balance() == real_account.balance() == 120

    def test_deep_chain(self):
        real_account = BankAccount(7)
        chain = build_chain(real_account, ["proxy"] * 200)
        assert chain.balance() == 7

    def test_chain_preserves_call_order(self):
        """
        GIVEN a recording account behind three proxies
        WHEN I call deposit, withdraw, deposit
        THEN the account sees the calls in that order
        """
        calls = []

        class RecordingAccount(BankAccount):
            def deposit(self, amount):
                calls.append(("deposit", amount))
                super().deposit(amount)

            def withdraw(self, amount):
                calls.append(("withdraw", amount))
                super().withdraw(amount)

        chain = build_chain(RecordingAccount(0), ["proxy", "dynamic", "proxy"])
        chain.deposit(1)
        chain.withdraw(2)
        chain.deposit(3)

        assert calls == [("deposit", 1), ("withdraw", 2), ("deposit", 3)]
