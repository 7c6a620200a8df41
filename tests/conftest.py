"""
Shared pytest fixtures for the ABI decoder test suite.
"""

import json

import pytest


@pytest.fixture
def erc20_abi():
    """A Cairo 1 ERC20-style ABI with one item of every recognized kind"""
    return [
        {
            'type': 'impl',
            'name': 'ERC20Impl',
            'interface_name': 'token::erc20::IERC20',
        },
        {
            'type': 'struct',
            'name': 'core::integer::u256',
            'members': [
                {'name': 'low', 'type': 'core::integer::u128'},
                {'name': 'high', 'type': 'core::integer::u128'},
            ],
        },
        {
            'type': 'enum',
            'name': 'core::bool',
            'variants': [{'name': 'False', 'type': '()'}, {'name': 'True', 'type': '()'}],
        },
        {
            'type': 'interface',
            'name': 'token::erc20::IERC20',
            'items': [
                {
                    'type': 'function',
                    'name': 'name',
                    'inputs': [],
                    'outputs': [{'type': 'core::felt252'}],
                    'state_mutability': 'view',
                },
                {
                    'type': 'function',
                    'name': 'transfer',
                    'inputs': [
                        {'name': 'recipient', 'type': 'core::starknet::contract_address::ContractAddress'},
                        {'name': 'amount', 'type': 'core::integer::u256'},
                    ],
                    'outputs': [{'type': 'core::bool'}],
                    'state_mutability': 'external',
                },
            ],
        },
        {
            'type': 'constructor',
            'name': 'constructor',
            'inputs': [{'name': 'supply', 'type': 'core::integer::u256'}],
        },
        {
            'type': 'event',
            'name': 'token::erc20::ERC20::Transfer',
            'kind': 'struct',
            'members': [
                {'name': 'from', 'type': 'core::address', 'kind': 'key'},
                {'name': 'to', 'type': 'core::address', 'kind': 'key'},
                {'name': 'value', 'type': 'core::u256', 'kind': 'data'},
            ],
        },
    ]


@pytest.fixture
def erc20_payload(erc20_abi):
    """The ERC20 ABI serialized as a JSON array"""
    return json.dumps(erc20_abi)


@pytest.fixture
def erc20_lines():
    """Rendered signatures for the ERC20 ABI, in order"""
    return [
        'Function: name() -> (Felt252) [State Mutability: view]',
        'Function: transfer(recipient: core::starknet::contract_address::ContractAddress, amount: U256) '
        '-> (core::bool) [State Mutability: external]',
        'Event: Transfer(from: ContractAddress, to: ContractAddress, value: U256)',
    ]
