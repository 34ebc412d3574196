import math

import pytest

from networth.services import aggregate
from networth.types import AssetToken, Portfolio, to_number


@pytest.mark.parametrize(
    'raw, expected',
    [
        (None, 0.0),
        ('', 0.0),
        ('  ', 0.0),
        ('1.25', 1.25),
        (' 3 ', 3.0),
        (7, 7.0),
        (0.5, 0.5),
    ],
)
def test_to_number_coerces_remote_balances(raw, expected):
    assert to_number(raw) == expected


def test_to_number_yields_nan_for_garbage():
    assert math.isnan(to_number('12abc'))


def test_asset_token_uses_own_fields_without_nested_token():
    token = AssetToken.model_validate({'symbol': 'WETH', 'price': 2000.0, 'balance': '0.75'})

    effective = token.resolve()

    assert effective.symbol == 'WETH'
    assert effective.price == 2000.0
    assert effective.balance == 0.75


def test_asset_token_prefers_nested_token():
    token = AssetToken.model_validate(
        {
            'metaType': 'BORROWED',
            'symbol': 'OUTER',
            'price': 5.0,
            'token': {'__typename': 'BaseTokenPositionBalance', 'symbol': 'USDC', 'balance': 12},
        }
    )

    effective = token.resolve()

    assert effective.symbol == 'USDC'
    assert effective.price is None
    assert effective.balance == 12.0


def test_missing_fields_default_permissively():
    portfolio = Portfolio.model_validate(
        {
            'tokenBalances': [{'network': 'BASE_MAINNET', 'token': {'balanceUSD': None}}],
            'appBalances': [{'appName': 'Aave', 'products': [{'assets': [{'tokens': [{}]}]}]}],
            'nftBalances': [{'balanceUSD': 10, 'network': 'ETHEREUM_MAINNET'}],
        }
    )

    token_balance = portfolio.token_balances[0]
    assert token_balance.token.balance_usd == 0.0
    assert token_balance.token.base_token.symbol == ''

    app = portfolio.app_balances[0]
    assert app.balance_usd == 0.0
    assert app.network == ''
    effective = app.products[0].assets[0].effective_tokens()
    assert effective[0].symbol == ''
    assert effective[0].balance == 0.0


def test_empty_payload():
    portfolio = Portfolio.model_validate({})
    assert portfolio.token_balances == []
    assert portfolio.app_balances == []


def test_null_fields_read_by_aggregation_are_tolerated():
    portfolio = Portfolio.model_validate(
        {
            'tokenBalances': [
                {
                    'network': None,
                    'token': {'balance': None, 'balanceUSD': 10, 'baseToken': {'symbol': None, 'price': 1}},
                },
                {'network': 'BASE_MAINNET', 'token': {'balanceUSD': 5, 'baseToken': None}},
                {'network': 'BASE_MAINNET', 'token': None},
            ],
            'appBalances': [
                {'network': None, 'appName': None, 'balanceUSD': 20, 'products': None},
                {'appName': 'Aave', 'balanceUSD': 30, 'products': [{'assets': None}, {'assets': [{'tokens': None}]}]},
                {
                    'appName': 'Morpho',
                    'balanceUSD': 40,
                    'products': [{'assets': [{'tokens': [{'symbol': None, 'price': None, 'balance': None, 'token': None}]}]}],
                },
            ],
        }
    )

    assert portfolio.token_balances[0].network == ''
    assert portfolio.token_balances[0].token.base_token.symbol == ''
    assert portfolio.token_balances[1].token.base_token.symbol == ''
    assert portfolio.token_balances[2].token.balance_usd == 0.0
    assert portfolio.app_balances[0].app_name == ''
    assert portfolio.app_balances[0].products == []
    assert portfolio.app_balances[1].products[0].assets == []
    assert portfolio.app_balances[1].products[1].assets[0].tokens == []

    result = aggregate(portfolio, 0)

    assert result.value == 105
    assert result.prices == {}
    assert result.balances == {}
    assert result.networks == ['', 'BASE_MAINNET']
    assert result.products['Aave'].tokens == {}
    assert result.products['Morpho'].tokens == {}
    assert result.products[''].value == 20


def test_null_top_level_lists_are_empty():
    portfolio = Portfolio.model_validate({'tokenBalances': None, 'appBalances': None})

    assert portfolio.token_balances == []
    assert portfolio.app_balances == []
    assert aggregate(portfolio, 0).value == 0


def test_descriptive_fields_pass_through_unvalidated():
    portfolio = Portfolio.model_validate(
        {
            'tokenBalances': [
                {
                    'network': 'ETHEREUM_MAINNET',
                    'updatedAt': 1700000000000.5,
                    'token': {
                        'balance': 2,
                        'balanceUSD': 4000,
                        'balanceRaw': 2000000000000000000,
                        'baseToken': {'symbol': 'ETH', 'price': 2000, 'decimals': 18.5, 'verified': 'yes'},
                    },
                }
            ],
            'appBalances': [
                {
                    'appName': 'Uniswap V3',
                    'updatedAt': '2024-01-01T00:00:00Z',
                    'balanceUSD': 100,
                    'products': [
                        {
                            'assets': [
                                {
                                    'decimals': 'eighteen',
                                    'supply': '1e30',
                                    'pricePerShare': [None, 'x', 1],
                                    'tokens': [{'symbol': 'USDC', 'price': 1, 'balance': '100'}],
                                }
                            ]
                        }
                    ],
                }
            ],
        }
    )

    assert portfolio.token_balances[0].token.base_token.decimals == 18.5
    assert portfolio.app_balances[0].products[0].assets[0].price_per_share == [None, 'x', 1]

    result = aggregate(portfolio, 0)

    assert result.value == 4100
    assert result.balances == {'ETH': 2, 'USDC': 100}
