"""
Basic usage example for disjoint-set.

This example demonstrates:
1. Building equivalence classes with union
2. Resolving representatives with find
3. Why union is not symmetric in which root survives
4. Sharing snapshots safely
"""

from disjoint_set import DisjointSet, MutableDisjointSet, find, to_dict, union


def main() -> None:
    # 1. Persistent structure: every union returns a new value
    accounts = DisjointSet.empty()
    accounts = accounts.union("alice@work", "alice@home")
    accounts = accounts.union("bob", "robert")
    accounts = accounts.union("alice@home", "al")

    print("Classes:")
    for root, members in accounts.groups().items():
        print(f"  {root}: {', '.join(members)}")

    # 2. find returns the root, or None for unknown elements
    print(f"\nfind('al') -> {accounts.find('al')}")
    print(f"find('carol') -> {accounts.find('carol')}")

    # 3. The first argument's root always survives
    left = accounts.union("bob", "al")
    right = accounts.union("al", "bob")
    print(f"\nunion('bob', 'al') root: {left.find('alice@work')}")
    print(f"union('al', 'bob') root: {right.find('alice@work')}")

    # The original snapshot is untouched
    print(f"\nOriginal still has {len(accounts.groups())} classes")

    # 4. Functional style, element last
    dset = union("c", "d", union("b", "c", union("a", "b", DisjointSet.empty())))
    print(f"\nCompressed: {to_dict(dset)}")
    print(f"find('d') -> {find('d', dset)}")

    # Large batches: union in place, then freeze a snapshot
    builder: MutableDisjointSet[int] = MutableDisjointSet()
    for i in range(1, 1000):
        builder.union(i % 10, i)
    frozen = builder.freeze()
    print(f"\nBatch built {len(frozen)} elements in {len(frozen.roots())} classes")


if __name__ == "__main__":
    main()
