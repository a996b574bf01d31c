from datetime import timedelta

import pytest

from scheduleit.retry import ExponentialBackoffStrategy, FixedRetryStrategy, RetryStrategy


def ms(value):
    return timedelta(milliseconds=value)


def test_fixed_strategy_returns_constant_delay():
    strategy = FixedRetryStrategy(ms(500))
    assert strategy.should_retry(0) is True
    assert strategy.should_retry(10) is True
    assert strategy.backoff_delay(0) == ms(500)
    assert strategy.backoff_delay(5) == ms(500)


def test_exponential_strategy_computes_exponential_delays():
    strategy = ExponentialBackoffStrategy(ms(100), ms(1000))
    assert strategy.should_retry(0) is True
    assert strategy.backoff_delay(0) == ms(100)
    assert strategy.backoff_delay(1) == ms(200)
    assert strategy.backoff_delay(2) == ms(400)
    assert strategy.backoff_delay(3) == ms(800)
    assert strategy.backoff_delay(4) == ms(1000)
    assert strategy.backoff_delay(5) == ms(1000)


def test_exponential_strategy_stays_capped_for_large_attempts():
    strategy = ExponentialBackoffStrategy(ms(100), ms(1000))
    assert strategy.backoff_delay(200) == ms(1000)


def test_exponential_strategy_rejects_negative_attempt():
    strategy = ExponentialBackoffStrategy(ms(100), ms(1000))
    with pytest.raises(ValueError):
        strategy.backoff_delay(-1)


def test_retry_strategy_is_abstract():
    with pytest.raises(TypeError):
        RetryStrategy()


def test_strategies_work_through_the_common_interface():
    strategies: list[RetryStrategy] = [
        FixedRetryStrategy(ms(1)),
        ExponentialBackoffStrategy(ms(1), ms(2)),
    ]
    assert [strategy.should_retry(3) for strategy in strategies] == [True, True]
    assert [strategy.backoff_delay(2) for strategy in strategies] == [ms(1), ms(2)]