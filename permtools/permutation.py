import random
from math import factorial
from sympy.combinatorics import Permutation as SymPyPermutation
from .checks import ensure_index, ensure_max_length, ensure_non_negative, ensure_permutation
from .permutation_tools import inverse, factorial_rank, factorial_unrank, get_cycles, get_sign


# 13! overflows a 32-bit signed integer.
MAX_INTEGER_RANK_LENGTH = 12


class Permutation(object):
	"""A permutation of the integers ``0,...,n-1``

	* ``Permutation`` owns a list of its elements; every constructor copies its
	  input and every accessor returning a list returns a copy, so two
	  permutations never share state.
	* Mutators (``swap``, ``reverse``, ``rotate``, ...) work in place and keep
	  the permutation a bijection by construction. Indices are validated
	  before anything is changed.
	* Random operations take an optional ``rng`` exposing ``randrange`` and
	  ``getrandbits`` (a ``random.Random``); the ``random`` module is used when
	  none is given.

	The constructor is overloaded on its arguments:

	* ``Permutation(n)``: a uniformly random permutation of length ``n``.
	* ``Permutation(n, rank)``: the permutation with the given rank in
	  ``[0, n!)`` (see ``to_big_integer``).
	* ``Permutation(sequence)``: a validated copy of ``sequence``.
	* ``Permutation(other)``: a copy of another ``Permutation``.
	* ``Permutation(other, k)``: the elements of ``other`` smaller than ``k``,
	  in the order in which they appear in ``other``.

	"""
	def __init__(self,*arg,rng=None):
		if len(arg) == 1 and isinstance(arg[0],Permutation):
			self._perm = list(arg[0]._perm)
		elif len(arg) == 2 and isinstance(arg[0],Permutation) and _is_int(arg[1]):
			other, k = arg
			if k >= len(other):
				self._perm = list(other._perm)
			else:
				self._perm = [v for v in other._perm if v < k]
		elif len(arg) == 1 and _is_int(arg[0]):
			ensure_non_negative(arg[0],"n")
			self._perm = list(range(arg[0]))
			self.scramble(rng)
		elif len(arg) == 2 and _is_int(arg[0]) and _is_int(arg[1]):
			n, rank = arg
			ensure_non_negative(n,"n")
			_ensure_rank(n,rank)
			self._perm = factorial_unrank(n,rank)
		elif len(arg) == 1 and hasattr(arg[0],'__iter__'):
			values = list(arg[0])
			ensure_permutation(values)
			self._perm = values
		else:
			raise TypeError("Bad argument to Permutation constructor: {}".format(arg))


	@classmethod
	def _wrap(cls,values):
		"""Take ownership of a list already known to be a permutation."""
		p = cls.__new__(cls)
		p._perm = values
		return p


	@classmethod
	def from_integer(cls,n,rank):
		"""Unrank, restricted to the fixed-width range ``n <= 12``."""
		ensure_max_length(n,MAX_INTEGER_RANK_LENGTH,"n")
		_ensure_rank(n,rank)
		return cls._wrap(factorial_unrank(n,rank))


	@classmethod
	def from_big_integer(cls,n,rank):
		"""Unrank with no limit on ``n``."""
		ensure_non_negative(n,"n")
		_ensure_rank(n,rank)
		return cls._wrap(factorial_unrank(n,rank))


	@classmethod
	def from_sympy(cls,sp):
		"""Convert from a ``sympy.combinatorics.Permutation`` (array form)."""
		return cls._wrap(list(sp.array_form))


	def to_sympy(self):
		return SymPyPermutation(list(self._perm))


	def copy(self):
		return Permutation(self)


	def __len__(self):
		return len(self._perm)


	def get(self,i,j=None):
		"""Return the element at index ``i``, or a copy of the elements at
		indices ``i`` through ``j`` inclusive.

		Raises:
			IndexError: if an index is outside ``[0, len(self))``.
			ValueError: if ``j < i``.

		"""
		ensure_index(i,len(self._perm),"i")
		if j is None:
			return self._perm[i]
		ensure_index(j,len(self._perm),"j")
		if j < i:
			raise ValueError("j must not be less than i")
		return self._perm[i:j+1]


	def __getitem__(self,i):
		return self.get(i)


	def to_array(self):
		return list(self._perm)


	def to_integer(self):
		"""Rank of the permutation, for lengths up to 12 only.

		Raises:
			ValueError: if the permutation is longer than 12.

		"""
		ensure_max_length(len(self._perm),MAX_INTEGER_RANK_LENGTH,"length")
		return factorial_rank(self._perm)


	def to_big_integer(self):
		"""Rank of the permutation in ``[0, n!)``.

		The rank is read in the factorial number system: the Lehmer digit of
		position ``i`` (the rank of ``self[i]`` among the elements not yet
		placed) has radix ``n-i``, least significant first. This is the exact
		inverse of ``Permutation(n, rank)``.
		"""
		return factorial_rank(self._perm)


	def get_inverse(self):
		return inverse(self._perm)


	def get_inverse_permutation(self):
		return Permutation._wrap(inverse(self._perm))


	def invert(self):
		self._perm[:] = inverse(self._perm)


	def cycles(self):
		"""Cycle decomposition of the permutation, fixed points included."""
		return get_cycles(self._perm)


	def parity(self):
		return get_sign(self._perm)


	def set(self,values):
		"""Replace the contents with a copy of (values).

		(values) is fully validated before anything changes.
		"""
		values = list(values)
		if len(values) != len(self._perm):
			raise ValueError("Length of sequence must be same as that of permutation: {} != {}".format(len(values),len(self._perm)))
		ensure_permutation(values)
		self._perm[:] = values


	def apply(self,operator,other=None):
		"""Apply a custom in-place operator.

		Unary operators are called as ``operator(raw, self)`` and binary
		operators (when ``other`` is given) as
		``operator(raw, other_raw, self, other)``, where the raw arguments are
		the backing lists. Operators must leave both lists permutations.
		"""
		if other is None:
			operator(self._perm,self)
		else:
			operator(self._perm,other._perm,self,other)


	def swap(self,i,j):
		n = len(self._perm)
		ensure_index(i,n,"i")
		ensure_index(j,n,"j")
		self._perm[i], self._perm[j] = self._perm[j], self._perm[i]


	def cycle(self,indexes):
		"""Apply a cycle over (indexes).

		``self[indexes[t]]`` receives the old ``self[indexes[t+1]]``, and the
		last index receives the old ``self[indexes[0]]``.
		"""
		n = len(self._perm)
		for i in indexes:
			ensure_index(i,n)
		if len(set(indexes)) != len(indexes):
			raise ValueError("Cycle indexes must be distinct")
		if len(indexes) > 1:
			p = self._perm
			temp = p[indexes[0]]
			for t in range(1,len(indexes)):
				p[indexes[t-1]] = p[indexes[t]]
			p[indexes[-1]] = temp


	def reverse(self,i=None,j=None):
		"""Reverse the whole permutation, or the elements between indices
		``i`` and ``j`` inclusive (in either order).
		"""
		if i is None and j is None:
			self._perm.reverse()
			return
		n = len(self._perm)
		ensure_index(i,n,"i")
		ensure_index(j,n,"j")
		if i > j:
			i, j = j, i
		self._perm[i:j+1] = self._perm[i:j+1][::-1]


	def rotate(self,k):
		"""Circular left rotation by ``k`` positions (mod length)."""
		n = len(self._perm)
		if n == 0:
			return
		k %= n
		if k:
			self._perm[:] = self._perm[k:] + self._perm[:k]


	def remove_and_insert(self,i,j):
		"""Remove the element at index ``i`` and reinsert it at index ``j``."""
		n = len(self._perm)
		ensure_index(i,n,"i")
		ensure_index(j,n,"j")
		if i != j:
			self._perm.insert(j,self._perm.pop(i))


	def remove_and_insert_block(self,i,size,j):
		"""Move the block of (size) elements starting at ``i`` so that it
		starts at ``j``.
		"""
		ensure_non_negative(size,"size")
		n = len(self._perm)
		ensure_index(i,n,"i")
		ensure_index(j,n,"j")
		if size == 0:
			return
		ensure_index(i+size-1,n,"i+size-1")
		ensure_index(j+size-1,n,"j+size-1")
		if i == j:
			return
		block = self._perm[i:i+size]
		del self._perm[i:i+size]
		self._perm[j:j] = block


	def swap_blocks(self,a,b,i,j):
		"""Exchange the blocks ``[a, b]`` and ``[i, j]`` (inclusive).

		Requires ``0 <= a <= b < i <= j < len(self)``. Elements between the
		blocks keep their relative order.
		"""
		if a < 0 or b < a or i <= b or j < i or j >= len(self._perm):
			raise ValueError("Illegal block definition: [{}, {}] and [{}, {}]".format(a,b,i,j))
		p = self._perm
		p[a:j+1] = p[i:j+1] + p[b+1:i] + p[a:b+1]


	def scramble(self,rng=None,guarantee_different=False):
		"""Randomly shuffle the permutation.

		The plain shuffle is the Fisher-Yates variant that writes ``i`` into
		position ``i`` directly when the sampled index is ``i``, rather than
		swapping. With (guarantee_different) and length at least 2, the result
		is always different from the current state: if no effective swap
		happened, or on a coin flip otherwise, positions 0 and 1 are swapped.
		"""
		rng = rng or random
		p = self._perm
		if guarantee_different:
			changed = False
			for i in range(len(p)-1,1,-1):
				j = rng.randrange(i+1)
				if i != j:
					p[i], p[j] = p[j], p[i]
					changed = True
			if len(p) > 1 and (not changed or rng.getrandbits(1)):
				p[0], p[1] = p[1], p[0]
		elif len(p) > 0:
			p[0] = 0
			for i in range(1,len(p)):
				j = rng.randrange(i+1)
				if j == i:
					p[i] = i
				else:
					p[i] = p[j]
					p[j] = i


	def scramble_block(self,i,j,rng=None):
		"""Randomly shuffle the elements at indices ``i`` through ``j``
		inclusive, always changing the block when it holds two or more
		elements.
		"""
		n = len(self._perm)
		ensure_index(i,n,"i")
		ensure_index(j,n,"j")
		if i == j:
			return
		if i > j:
			i, j = j, i
		rng = rng or random
		p = self._perm
		changed = False
		for k in range(j,i+1,-1):
			l = i + rng.randrange(k-i+1)
			if l != k:
				p[l], p[k] = p[k], p[l]
				changed = True
		if not changed or rng.getrandbits(1):
			p[i], p[i+1] = p[i+1], p[i]


	def scramble_indexes(self,indexes,rng=None):
		"""Randomly shuffle the elements at an arbitrary set of (indexes),
		always changing them when there are two or more.

		Raises:
			IndexError: if an index is outside ``[0, len(self))``.
			ValueError: if an index is repeated.

		"""
		n = len(self._perm)
		for i in indexes:
			ensure_index(i,n)
		if len(set(indexes)) != len(indexes):
			raise ValueError("Scramble indexes must be distinct")
		if len(indexes) <= 1:
			return
		rng = rng or random
		p = self._perm
		changed = False
		for j in range(len(indexes)-1,1,-1):
			i = rng.randrange(j+1)
			if i != j:
				a, b = indexes[i], indexes[j]
				p[a], p[b] = p[b], p[a]
				changed = True
		if not changed or rng.getrandbits(1):
			a, b = indexes[0], indexes[1]
			p[a], p[b] = p[b], p[a]


	def __iter__(self):
		return PermutationIterator(self)


	def __str__(self):
		return " ".join(str(v) for v in self._perm)


	def __repr__(self):
		return "Permutation({})".format(self._perm)


	def __eq__(self,other):
		if not isinstance(other,Permutation):
			return NotImplemented
		return self._perm == other._perm


	def __hash__(self):
		return hash(tuple(self._perm))


class PermutationIterator(object):
	"""Iterates over all ``n!`` permutations of a given length.

	The first permutation produced is the starting permutation itself. Every
	permutation produced is an independent copy, so callers may mutate it
	freely. The iterator keeps, for each position ``i``, the index it last
	swapped position ``i`` with; each step undoes and advances these swaps
	from the right, which visits every permutation exactly once.

	Args:
		start (Permutation or int): The first permutation, or a length, in
			which case iteration starts from a random permutation of that
			length.

	"""
	def __init__(self,start):
		self._p = Permutation(start)
		self._last_swap = list(range(len(self._p)))
		self._done = False


	def __iter__(self):
		return self


	def has_next(self):
		return not self._done


	def __next__(self):
		if self._done:
			raise StopIteration
		current = Permutation(self._p)
		last_swap = self._last_swap
		n = len(last_swap)
		if n <= 1:
			self._done = True
		else:
			p = self._p._perm
			for i in range(n-2,-1,-1):
				if last_swap[i] != i:
					p[i], p[last_swap[i]] = p[last_swap[i]], p[i]
				if last_swap[i] == n-1:
					last_swap[i] = i
					if i == 0:
						self._done = True
					continue
				last_swap[i] += 1
				p[i], p[last_swap[i]] = p[last_swap[i]], p[i]
				break
		return current


def _is_int(x):
	return isinstance(x,int) and not isinstance(x,bool)


def _ensure_rank(n,rank):
	if rank < 0 or rank >= factorial(n):
		raise ValueError("rank must be in [0, {}!), got {}".format(n,rank))
