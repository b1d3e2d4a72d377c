from bt.uid import UidGenerator


class _Coordinator:
    def __init__(self):
        self.seen = []

    def gen_uid(self, local_uid: str) -> str:
        self.seen.append(local_uid)
        return f"site-7:{local_uid}"


class TestUidGenerator:

    def test_local_ids_increment(self):
        gen = UidGenerator()
        assert [gen.gen_uid() for _ in range(3)] == ["1", "2", "3"]
        assert gen.counter == 3

    def test_coordinator_makes_ids_global(self):
        coord = _Coordinator()
        gen = UidGenerator(coord)
        assert gen.gen_uid() == "site-7:1"
        assert gen.gen_uid() == "site-7:2"
        assert coord.seen == ["1", "2"]

    def test_generators_are_independent(self):
        a, b = UidGenerator(), UidGenerator()
        a.gen_uid()
        assert b.gen_uid() == "1"
