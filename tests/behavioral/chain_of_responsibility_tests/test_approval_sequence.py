import pytest
from behavioral.chain_of_responsibility.approval_sequence import ApprovalChain, ApprovalChainBuilder, EmptyChainError
from behavioral.chain_of_responsibility.purchase_approval_chain import ApproverRole, build_default_chain


@pytest.mark.unit
def test_default_chain_orders_roles_by_authority():
    chain = ApprovalChain.default()
    assert chain.roles == (ApproverRole.MANAGER, ApproverRole.DIRECTOR, ApproverRole.VICE_PRESIDENT)
    assert len(chain) == 3


@pytest.mark.unit
def test_sequence_prints_same_messages_as_linked_chain(capsys):
    chain = ApprovalChain.default()
    for amount in (800, 4500, 12000):
        chain.process(amount)
    assert capsys.readouterr().out == (
        "Manager approves the purchase request of 800\n"
        "Director approves the purchase request of 4500\n"
    )


@pytest.mark.unit
def test_sequence_and_linked_chain_agree():
    sequence = ApprovalChain.default()
    linked = build_default_chain()
    for amount in (-1, 0, 1000, 1001, 5000, 5001, 10000, 10001):
        assert sequence.handle(amount) == linked.handle(amount)


@pytest.mark.unit
def test_builder_is_fluent_and_chain_is_immutable():
    builder = ApprovalChainBuilder()
    chain = builder.add(ApproverRole.DIRECTOR).add(ApproverRole.VICE_PRESIDENT).build()
    builder.add(ApproverRole.MANAGER)
    assert list(chain) == [ApproverRole.DIRECTOR, ApproverRole.VICE_PRESIDENT]
    assert chain.handle(500).approver == "Director"
    with pytest.raises(AttributeError):
        chain.roles = ()


@pytest.mark.unit
def test_empty_builder_raises():
    with pytest.raises(EmptyChainError):
        ApprovalChainBuilder().build()


@pytest.mark.unit
def test_direct_construction_with_no_roles_raises():
    with pytest.raises(EmptyChainError):
        ApprovalChain(())


@pytest.mark.unit
def test_direct_construction_copies_roles_into_tuple():
    roles = [ApproverRole.MANAGER]
    chain = ApprovalChain(roles)
    roles.append(ApproverRole.VICE_PRESIDENT)
    assert chain.roles == (ApproverRole.MANAGER,)
    assert chain.handle(9000) is None


@pytest.mark.unit
def test_to_linked_preserves_order():
    head = ApprovalChainBuilder().add(ApproverRole.MANAGER).add(ApproverRole.VICE_PRESIDENT).build().to_linked()
    assert head.title == "Manager"
    assert head.next.title == "Vice President" and head.next.next is None
    assert head.handle(3000).approver == "Vice President"
