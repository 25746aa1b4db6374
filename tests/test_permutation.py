import random
from math import factorial
import pytest
from sympy.combinatorics import Permutation as SymPyPermutation
from permtools import Permutation


def test_construct_from_sequence_copies():
	a = [2,0,1]
	p = Permutation(a)
	a[0] = 5
	assert p.to_array() == [2,0,1]
	arr = p.to_array()
	arr[0] = 1
	assert p.to_array() == [2,0,1]


@pytest.mark.parametrize("values", [[0,0], [1,2], [-1,0], [0,1,3]])
def test_construct_invalid_sequence(values):
	with pytest.raises(ValueError):
		Permutation(values)


def test_construct_bad_arguments():
	with pytest.raises(TypeError):
		Permutation()
	with pytest.raises(TypeError):
		Permutation(1.5)
	with pytest.raises(ValueError):
		Permutation(-1)


def test_random_construction_is_permutation():
	rng = random.Random(7)
	for n in range(11):
		p = Permutation(n,rng=rng)
		assert len(p) == n
		assert sorted(p.to_array()) == list(range(n))


def test_random_construction_is_reproducible():
	assert Permutation(8,rng=random.Random(3)) == Permutation(8,rng=random.Random(3))


def test_rank_round_trip_exhaustive():
	for n in range(7):
		seen = set()
		for r in range(factorial(n)):
			p = Permutation(n,r)
			assert p.to_integer() == r
			assert p.to_big_integer() == r
			seen.add(p)
		assert len(seen) == factorial(n)


def test_rank_round_trip_sampled():
	rng = random.Random(11)
	for n in range(7,13):
		for i in range(50):
			r = rng.randrange(factorial(n))
			assert Permutation.from_integer(n,r).to_integer() == r
			p = Permutation(n,rng=rng)
			assert Permutation(n,p.to_integer()) == p


def test_rank_known_values():
	assert Permutation(5,0) == Permutation([0,1,2,3,4])
	assert Permutation(5,factorial(5)-1) == Permutation([4,3,2,1,0])
	assert Permutation(3,1) == Permutation([1,0,2])
	assert Permutation([1,0,2]).to_integer() == 1


def test_big_integer_rank():
	r = factorial(20) - 12345
	p = Permutation(20,r)
	assert p.to_big_integer() == r
	assert Permutation.from_big_integer(20,r) == p
	with pytest.raises(ValueError):
		p.to_integer()
	with pytest.raises(ValueError):
		Permutation.from_integer(13,0)
	assert Permutation.from_big_integer(13,5).to_big_integer() == 5


def test_rank_out_of_range():
	with pytest.raises(ValueError):
		Permutation(3,6)
	with pytest.raises(ValueError):
		Permutation(3,-1)
	with pytest.raises(ValueError):
		Permutation.from_integer(4,24)


def test_copy_is_independent():
	p = Permutation([3,1,0,2])
	for q in (Permutation(p), p.copy()):
		assert q == p
		q.swap(0,1)
		assert p == Permutation([3,1,0,2])


def test_projection():
	p = Permutation([4,1,3,0,2])
	assert Permutation(p,3) == Permutation([1,0,2])
	assert Permutation(p,5) == p
	assert Permutation(p,9) == p
	assert len(Permutation(p,0)) == 0


def test_get():
	p = Permutation([4,1,3,0,2])
	assert p.get(0) == 4
	assert p[2] == 3
	assert p.get(1,3) == [1,3,0]
	assert p.get(2,2) == [3]
	with pytest.raises(ValueError):
		p.get(3,1)
	with pytest.raises(IndexError):
		p.get(5)
	with pytest.raises(IndexError):
		p.get(-1)
	with pytest.raises(IndexError):
		p.get(1,5)


def test_inverse():
	p = Permutation([4,1,3,0,2])
	assert p.get_inverse() == [3,1,4,2,0]
	assert p.get_inverse_permutation() == Permutation([3,1,4,2,0])
	p.invert()
	assert p == Permutation([3,1,4,2,0])
	rng = random.Random(5)
	for n in range(10):
		q = Permutation(n,rng=rng)
		inv = q.get_inverse()
		assert all(inv[q[i]] == i for i in range(n))


def test_swap():
	p = Permutation(5,0)
	p.swap(1,3)
	assert p == Permutation([0,3,2,1,4])
	with pytest.raises(IndexError):
		p.swap(0,5)
	assert p == Permutation([0,3,2,1,4])


def test_reverse():
	p = Permutation(5,0)
	p.reverse()
	assert p == Permutation([4,3,2,1,0])
	p = Permutation(5,0)
	p.reverse(1,3)
	assert p == Permutation([0,3,2,1,4])
	p = Permutation(5,0)
	p.reverse(3,1)
	assert p == Permutation([0,3,2,1,4])
	empty = Permutation([])
	empty.reverse()
	assert len(empty) == 0


def test_rotate():
	p = Permutation(5,0)
	p.rotate(2)
	assert p == Permutation([2,3,4,0,1])
	p = Permutation(5,0)
	p.rotate(7)
	assert p == Permutation([2,3,4,0,1])
	p = Permutation(5,0)
	p.rotate(-1)
	assert p == Permutation([4,0,1,2,3])
	p = Permutation(5,0)
	p.rotate(5)
	assert p == Permutation(5,0)
	empty = Permutation([])
	empty.rotate(3)
	assert len(empty) == 0


def test_cycle():
	p = Permutation(5,0)
	p.cycle([0,2,4])
	assert p == Permutation([2,1,4,3,0])
	p = Permutation(5,0)
	p.cycle([3])
	assert p == Permutation(5,0)
	p.cycle([1,3])
	assert p == Permutation([0,3,2,1,4])
	with pytest.raises(ValueError):
		p.cycle([0,1,0])
	with pytest.raises(IndexError):
		p.cycle([0,5])


def test_remove_and_insert():
	p = Permutation(5,0)
	p.remove_and_insert(1,3)
	assert p == Permutation([0,2,3,1,4])
	p = Permutation(5,0)
	p.remove_and_insert(3,1)
	assert p == Permutation([0,3,1,2,4])
	p = Permutation(5,0)
	p.remove_and_insert(2,2)
	assert p == Permutation(5,0)


def test_remove_and_insert_block():
	p = Permutation(7,0)
	p.remove_and_insert_block(1,2,3)
	assert p == Permutation([0,3,4,1,2,5,6])
	p = Permutation(7,0)
	p.remove_and_insert_block(4,2,1)
	assert p == Permutation([0,4,5,1,2,3,6])
	p = Permutation(7,0)
	p.remove_and_insert_block(2,1,5)
	assert p == Permutation([0,1,3,4,5,2,6])
	p.remove_and_insert_block(2,0,5)
	assert p == Permutation([0,1,3,4,5,2,6])
	with pytest.raises(IndexError):
		p.remove_and_insert_block(5,3,0)
	for i, size, j in [(100,3,100), (7,0,7), (2,0,9), (-1,1,-1), (1,3,5)]:
		with pytest.raises(IndexError):
			p.remove_and_insert_block(i,size,j)
	assert p == Permutation([0,1,3,4,5,2,6])


def test_swap_blocks():
	p = Permutation(8,0)
	p.swap_blocks(1,2,4,6)
	assert p == Permutation([0,4,5,6,3,1,2,7])
	p = Permutation(8,0)
	p.swap_blocks(1,1,3,3)
	assert p == Permutation([0,3,2,1,4,5,6,7])
	p = Permutation(8,0)
	p.swap_blocks(1,2,3,4)
	assert p == Permutation([0,3,4,1,2,5,6,7])
	p = Permutation(8,0)
	p.swap_blocks(0,3,4,7)
	assert p == Permutation([4,5,6,7,0,1,2,3])
	for a, b, i, j in [(2,1,3,4), (0,2,2,3), (0,1,3,8), (-1,1,3,4), (0,1,4,3)]:
		with pytest.raises(ValueError):
			p.swap_blocks(a,b,i,j)


def test_set():
	p = Permutation(4,0)
	p.set([3,2,1,0])
	assert p == Permutation([3,2,1,0])
	with pytest.raises(ValueError):
		p.set([0,1,2])
	with pytest.raises(ValueError):
		p.set([0,1,1,2])
	assert p == Permutation([3,2,1,0])


def test_scramble():
	rng = random.Random(13)
	for n in range(10):
		p = Permutation(n,0)
		p.scramble(rng)
		assert sorted(p.to_array()) == list(range(n))


def test_scramble_guarantee_different():
	rng = random.Random(17)
	for n in range(2,9):
		for trial in range(50):
			p = Permutation(n,rng=rng)
			original = Permutation(p)
			p.scramble(rng,guarantee_different=True)
			assert p != original
			assert sorted(p.to_array()) == list(range(n))
	p = Permutation([0])
	p.scramble(rng,guarantee_different=True)
	assert p == Permutation([0])


def test_scramble_block():
	rng = random.Random(19)
	for trial in range(50):
		p = Permutation(8,0)
		p.scramble_block(5,2,rng)
		arr = p.to_array()
		assert arr[:2] == [0,1]
		assert arr[6:] == [6,7]
		assert sorted(arr[2:6]) == [2,3,4,5]
		assert p != Permutation(8,0)
	p = Permutation(8,0)
	p.scramble_block(3,3,rng)
	assert p == Permutation(8,0)


def test_scramble_indexes():
	rng = random.Random(23)
	indexes = [0,3,5]
	for trial in range(50):
		p = Permutation(7,0)
		p.scramble_indexes(indexes,rng)
		arr = p.to_array()
		assert [arr[i] for i in (1,2,4,6)] == [1,2,4,6]
		assert sorted(arr[i] for i in indexes) == indexes
		assert p != Permutation(7,0)
	with pytest.raises(IndexError):
		Permutation(3,0).scramble_indexes([0,3],rng)
	p = Permutation(5,0)
	with pytest.raises(ValueError):
		p.scramble_indexes([2,2],rng)
	assert p == Permutation(5,0)


def _frequencies(draw,count):
	counts = {}
	for i in range(count):
		p = draw()
		counts[p] = counts.get(p,0) + 1
	return counts


def test_random_construction_is_uniform():
	rng = random.Random(31)
	counts = _frequencies(lambda: Permutation(4,rng=rng),24000)
	assert len(counts) == 24
	assert min(counts.values()) > 800
	assert max(counts.values()) < 1200


def test_scramble_is_uniform():
	rng = random.Random(37)
	def draw():
		p = Permutation([3,1,0,2])
		p.scramble(rng)
		return p
	counts = _frequencies(draw,24000)
	assert len(counts) == 24
	assert min(counts.values()) > 800
	assert max(counts.values()) < 1200


def test_str_and_repr():
	assert str(Permutation([2,0,1])) == "2 0 1"
	assert str(Permutation([])) == ""
	assert repr(Permutation([1,0])) == "Permutation([1, 0])"


def test_equality_and_hash():
	p = Permutation([0,2,1])
	q = Permutation([0,2,1])
	assert p == q
	assert hash(p) == hash(q)
	assert p != Permutation([0,1,2])
	assert p != Permutation([0,2,1,3])
	assert p != [0,2,1]
	assert len({p,q,Permutation([1,0,2])}) == 2


def test_cycles_and_parity():
	p = Permutation([1,2,0,4,3])
	assert p.cycles() == [(0,1,2),(3,4)]
	assert p.parity() == -1
	assert Permutation([1,2,0]).parity() == 1
	assert Permutation(4,0).cycles() == [(0,),(1,),(2,),(3,)]


def test_sympy_interop():
	rng = random.Random(29)
	for n in range(1,9):
		p = Permutation(n,rng=rng)
		sp = p.to_sympy()
		assert isinstance(sp,SymPyPermutation)
		assert sp.array_form == p.to_array()
		assert sp.signature() == p.parity()
		assert sp.cycles == len(p.cycles())
		assert Permutation.from_sympy(sp) == p


def test_apply():
	def swap_first_two(raw,p):
		raw[0], raw[1] = raw[1], raw[0]
	def copy_from(raw,other_raw,p,other):
		raw[:] = other_raw
	p = Permutation(4,0)
	p.apply(swap_first_two)
	assert p == Permutation([1,0,2,3])
	q = Permutation([3,2,1,0])
	p.apply(copy_from,q)
	assert p == q
