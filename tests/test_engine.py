#!/usr/bin/env python3
# Test declaration of QoS override parameters for publishers and subscriptions.

import threading

import pytest

from qos_overrides import (
    Duration,
    HistoryPolicy,
    InvalidParameterTypeError,
    InvalidProfileError,
    LivelinessPolicy,
    ParameterAlreadyDeclaredError,
    ParameterStore,
    ParameterValue,
    QoSPolicyKind,
    QoSProfile,
    QosCallbackResult,
    QosOverridingOptions,
    ReliabilityPolicy,
    UnknownPolicyValueError,
    ValueConversionError,
    allowed_policies,
    declare_publisher_qos_parameters,
    declare_subscription_qos_parameters,
)


class RecordingStore:
    # Parameter store double that records every declaration.

    def __init__(self, overrides=None):
        self.overrides = overrides or {}
        self.declared = []

    def declare_parameter(self, name, default_value, descriptor):
        self.declared.append((name, default_value, descriptor))
        return self.overrides.get(name, default_value)


ALL_KINDS = set(QoSPolicyKind) - {QoSPolicyKind.INVALID}


def test_publisher_declares_all_policies_in_order():
    store = RecordingStore()
    qos = QoSProfile()
    declare_publisher_qos_parameters(QosOverridingOptions(ALL_KINDS), store, '/chatter', qos)

    names = [name for name, _, _ in store.declared]
    assert names == [
        'qos_overrides./chatter.publisher.' + str(k) for k in allowed_policies('publisher')
    ], "Unexpected declarations: %s" % names
    assert qos == QoSProfile(), "Profile changed without overrides"
    print("OK: publisher declarations")


def test_descriptors_are_read_only():
    store = RecordingStore()
    options = QosOverridingOptions([QoSPolicyKind.DEPTH], entity_id='sensor')
    declare_publisher_qos_parameters(options, store, '/chatter', QoSProfile(depth=7))

    assert len(store.declared) == 1
    name, default_value, descriptor = store.declared[0]
    assert name == 'qos_overrides./chatter.publisher_sensor.depth'
    assert default_value == ParameterValue(7)
    assert descriptor.read_only is True
    assert descriptor.name == name
    assert descriptor.description == \
        'qos policy {depth} for publisher {/chatter} with id {sensor}'


def test_overrides_are_applied():
    prefix = 'qos_overrides./chatter.subscription.'
    store = RecordingStore({
        prefix + 'depth': ParameterValue(5),
        prefix + 'reliability': ParameterValue('best_effort'),
        prefix + 'deadline': ParameterValue(1000000000),
        prefix + 'liveliness': ParameterValue('automatic'),
        prefix + 'avoid_ros_namespace_conventions': ParameterValue(True),
    })
    qos = QoSProfile()
    declare_subscription_qos_parameters(QosOverridingOptions(ALL_KINDS), store, '/chatter', qos)

    assert qos.depth == 5
    assert qos.reliability is ReliabilityPolicy.BEST_EFFORT
    assert qos.deadline == Duration(1)
    assert qos.liveliness is LivelinessPolicy.AUTOMATIC
    assert qos.avoid_ros_namespace_conventions is True
    assert qos.history is HistoryPolicy.KEEP_LAST
    print("OK: overrides applied")


def test_non_catalog_kind_is_skipped():
    store = RecordingStore()
    qos = QoSProfile(lifespan=Duration(3))
    options = QosOverridingOptions([QoSPolicyKind.LIFESPAN, QoSPolicyKind.INVALID])
    declare_subscription_qos_parameters(options, store, '/chatter', qos)

    assert store.declared == [], "Subscription declared %s" % store.declared
    assert qos.lifespan == Duration(3)


def test_only_requested_policies_are_declared():
    store = RecordingStore()
    options = QosOverridingOptions.with_default_policies()
    declare_publisher_qos_parameters(options, store, '/chatter', QoSProfile())
    assert [n.rsplit('.', 1)[1] for n, _, _ in store.declared] == \
        ['history', 'depth', 'reliability']


def test_validation_callback_rejects_profile():
    store = RecordingStore({'qos_overrides./chatter.publisher.depth': ParameterValue(0)})
    options = QosOverridingOptions([QoSPolicyKind.DEPTH], callback=lambda qos: qos.depth > 0)
    qos = QoSProfile()
    with pytest.raises(InvalidProfileError) as excinfo:
        declare_publisher_qos_parameters(options, store, '/chatter', qos)
    assert 'validation callback failed' in str(excinfo.value)
    print("OK: validation callback failure")


def test_validation_callback_reason():
    def callback(qos):
        return QosCallbackResult(False, 'keep_all needs a large history')

    options = QosOverridingOptions([QoSPolicyKind.HISTORY], callback=callback)
    with pytest.raises(InvalidProfileError) as excinfo:
        declare_publisher_qos_parameters(options, RecordingStore(), '/chatter', QoSProfile())
    assert excinfo.value.reason == 'keep_all needs a large history'
    assert str(excinfo.value) == 'validation callback failed: keep_all needs a large history'


def test_validation_callback_sees_final_profile():
    seen = []

    def callback(qos):
        seen.append(qos.depth)
        return QosCallbackResult()

    store = RecordingStore({'qos_overrides./chatter.publisher.depth': ParameterValue(3)})
    options = QosOverridingOptions([QoSPolicyKind.DEPTH], callback=callback)
    declare_publisher_qos_parameters(options, store, '/chatter', QoSProfile())
    assert seen == [3]


def test_validation_callback_runs_without_policies():
    calls = []
    options = QosOverridingOptions([], callback=lambda qos: calls.append(qos) or True)
    declare_publisher_qos_parameters(options, RecordingStore(), '/chatter', QoSProfile())
    assert len(calls) == 1


def test_unknown_override_stops_the_pass():
    prefix = 'qos_overrides./chatter.publisher.'
    store = RecordingStore({
        prefix + 'depth': ParameterValue(5),
        prefix + 'liveliness': ParameterValue('sometimes'),
    })
    qos = QoSProfile()
    with pytest.raises(UnknownPolicyValueError):
        declare_publisher_qos_parameters(QosOverridingOptions(ALL_KINDS), store, '/chatter', qos)

    names = [n.rsplit('.', 1)[1] for n, _, _ in store.declared]
    assert names[-1] == 'liveliness', "Declarations continued after failure: %s" % names
    assert 'reliability' not in names
    # Policies before the failure are not rolled back.
    assert qos.depth == 5
    assert qos.liveliness is LivelinessPolicy.SYSTEM_DEFAULT


def test_invalid_profile_fails_before_declaring():
    store = RecordingStore()
    qos = QoSProfile(durability=99)
    with pytest.raises(ValueConversionError):
        declare_publisher_qos_parameters(QosOverridingOptions(ALL_KINDS), store, '/chatter', qos)
    assert [n.rsplit('.', 1)[1] for n, _, _ in store.declared] == [
        'avoid_ros_namespace_conventions', 'deadline'
    ]


def test_store_errors_propagate():
    store = ParameterStore()
    options = QosOverridingOptions([QoSPolicyKind.DEPTH])
    declare_publisher_qos_parameters(options, store, '/chatter', QoSProfile())
    with pytest.raises(ParameterAlreadyDeclaredError):
        declare_publisher_qos_parameters(options, store, '/chatter', QoSProfile())

    # A second publisher on the same topic needs its own id.
    declare_publisher_qos_parameters(
        QosOverridingOptions([QoSPolicyKind.DEPTH], entity_id='second'),
        store, '/chatter', QoSProfile())
    assert store.has_parameter('qos_overrides./chatter.publisher_second.depth')


def test_override_type_mismatch_from_store():
    store = ParameterStore({'qos_overrides./chatter.publisher.depth': 'ten'})
    with pytest.raises(InvalidParameterTypeError):
        declare_publisher_qos_parameters(
            QosOverridingOptions([QoSPolicyKind.DEPTH]), store, '/chatter', QoSProfile())


def test_parameter_store_end_to_end():
    store = ParameterStore({
        'qos_overrides./chatter.publisher.history': 'keep_all',
        'qos_overrides./chatter.subscription.depth': 1,
    })
    pub_qos = QoSProfile()
    sub_qos = QoSProfile()
    options = QosOverridingOptions.with_default_policies()
    declare_publisher_qos_parameters(options, store, '/chatter', pub_qos)
    declare_subscription_qos_parameters(options, store, '/chatter', sub_qos)

    assert pub_qos.history is HistoryPolicy.KEEP_ALL
    assert sub_qos.depth == 1
    assert store.get_parameter('qos_overrides./chatter.publisher.depth') == ParameterValue(10)
    assert store.describe_parameter('qos_overrides./chatter.subscription.depth').read_only
    assert sorted(store.get_parameters_by_prefix('qos_overrides./chatter.subscription')) == \
        ['depth', 'history', 'reliability']


def test_concurrent_declarations():
    store = ParameterStore()
    errors = []

    def declare(index):
        try:
            declare_publisher_qos_parameters(
                QosOverridingOptions.with_default_policies(entity_id=str(index)),
                store, '/chatter', QoSProfile())
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=declare, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert len(store.list_parameters()) == 8 * 3
