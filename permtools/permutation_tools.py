"""Low level routines over raw permutation lists.

These functions operate on plain lists of integers (the backing store of a
``Permutation``) and are shared by ``Permutation`` and the distance measures.
None of them validate their arguments; callers are expected to pass lists
that are already known to be permutations.

"""


def inverse(perm):
	"""Return ``inv`` such that ``inv[perm[i]] == i`` for all ``i``."""
	inv = [0]*len(perm)
	for i, v in enumerate(perm):
		inv[v] = i
	return inv


def relabel(perm1,perm2):
	"""Relabel (perm2) through the inverse of (perm1).

	The result is the position in (perm1) of each element of (perm2), so that
	(perm1) itself maps to the identity ordering.
	"""
	inv1 = inverse(perm1)
	return [inv1[v] for v in perm2]


def factorial_rank(perm):
	"""Rank a permutation in the factorial number system.

	The Lehmer digit of position ``i`` is the rank of ``perm[i]`` among the
	elements not yet placed, and carries radix ``n-i``. The digit of position
	0 is the least significant.

	Args:
		perm (list): A permutation of ``0,...,n-1``.

	Returns:
		rank (int): An integer in ``[0, n!)``.

	"""
	n = len(perm)
	index = list(range(n))
	rank = 0
	multiplier = 1
	radix = n
	for i in range(n-1):
		rank += multiplier*index[perm[i]]
		for j in range(perm[i],n):
			index[j] -= 1
		multiplier *= radix
		radix -= 1
	return rank


def factorial_unrank(n,rank):
	"""Inverse of ``factorial_rank``.

	At step ``i`` the digit ``rank % (n-i)`` selects which of the remaining
	elements moves to position ``i``; the elements in between shift right by
	one.

	Args:
		n (int): The permutation length.
		rank (int): An integer in ``[0, n!)``.

	Returns:
		perm (list): The permutation of length ``n`` with the given rank.

	"""
	perm = list(range(n))
	for i in range(n-1):
		rank, digit = divmod(rank,n-i)
		j = i + digit
		perm.insert(i,perm.pop(j))
	return perm


def get_cycles(perm):
	"""
	Takes a permutation list and returns its cycle decomposition.

	(perm) should be a list (i_0,i_1,...) which is a permutation of
	(0,...,n-1). The jth entry is interpreted as the image of j.
	[cycles] is a list of tuples, each of which is a cycle of the
	permutation (perm), fixed points included. Each cycle begins with its
	smallest element and cycles are listed in order of their first element.
	"""
	seen = [False]*len(perm)
	cycles = []
	for t0 in range(len(perm)):
		if seen[t0]:
			continue
		cycle = []
		t = t0
		while not seen[t]:
			seen[t] = True
			cycle.append(t)
			t = perm[t]
		cycles.append(tuple(cycle))
	return cycles


def get_sign(perm):
	"""
	Constructs the sign (parity) of a permutation by counting cycles.
	"""
	sign = 1
	for c in get_cycles(perm):
		sign *= (-1)**(len(c)-1)
	return sign


def cycle_lengths(perm1,perm2,stop_after=None):
	"""Lengths of the non-singleton cycles relating (perm1) to (perm2).

	Positions where the two permutations agree are fixed points and are
	skipped. From each remaining position ``i`` the cycle is traced by
	marking ``perm1[i]`` used and moving to the position in (perm1) of
	``perm2[i]``, until an element that was already used comes up again.

	Args:
		perm1 (list): A permutation.
		perm2 (list): A permutation of the same length.
		stop_after (int): If given, stop tracing once this many cycles have
			been found.

	Returns:
		lengths (list): One entry per non-singleton cycle, in the order the
		cycles were found.

	"""
	n = len(perm1)
	used = [False]*n
	for k in range(n):
		if perm1[k] == perm2[k]:
			used[perm1[k]] = True
	inv1 = inverse(perm1)
	lengths = []
	for start in range(n):
		if used[perm1[start]]:
			continue
		if stop_after is not None and len(lengths) >= stop_after:
			break
		i = start
		j = perm1[i]
		length = 0
		while not used[j]:
			used[j] = True
			length += 1
			j = perm2[i]
			i = inv1[j]
		lengths.append(length)
	return lengths


def count_inversions(array):
	"""Count inversions of (array) by merge sort.

	(array) is sorted in place as a side effect. During each merge, taking an
	element from the right half ahead of the remaining left half elements adds
	the number of those remaining elements to the count. Runs in O(n log n).
	"""
	return _count_inversions(array,0,len(array)-1)


def _count_inversions(array,first,last):
	if last <= first:
		return 0
	m = (first+last) >> 1
	return (_count_inversions(array,first,m)
			+ _count_inversions(array,m+1,last)
			+ _merge(array,first,m+1,last+1))


def _merge(array,first,mid,end):
	left = array[first:mid]
	right = array[mid:end]
	i = 0
	j = 0
	k = first
	count = 0
	while i < len(left) and j < len(right):
		if left[i] < right[j]:
			array[k] = left[i]
			i += 1
		else:
			count += len(left) - i
			array[k] = right[j]
			j += 1
		k += 1
	array[k:end] = left[i:] + right[j:]
	return count


def count_weighted_inversions(array,weights):
	"""Count weighted inversions of (array) by merge sort.

	Each inversion between elements ``a`` and ``b`` contributes
	``weights[a]*weights[b]``. The merge keeps a running total of the weights
	of the left half elements not yet emitted, so that the whole count stays
	O(n log n). (array) is sorted in place as a side effect.

	Args:
		array (list): Distinct integers, each a valid index into (weights).
		weights (list): Weight of each element value.

	Returns:
		count (float): The weighted inversion count.

	"""
	if len(array) <= 1:
		return 0.0
	m = len(array) >> 1
	left = array[:m]
	right = array[m:]
	count = count_weighted_inversions(left,weights) + count_weighted_inversions(right,weights)
	remaining = 0.0
	for v in left:
		remaining += weights[v]
	i = 0
	j = 0
	k = 0
	while i < len(left) and j < len(right):
		if left[i] < right[j]:
			array[k] = left[i]
			remaining -= weights[left[i]]
			i += 1
		else:
			count += weights[right[j]]*remaining
			array[k] = right[j]
			j += 1
		k += 1
	array[k:] = left[i:] + right[j:]
	return count
