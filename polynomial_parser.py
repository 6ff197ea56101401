from __future__ import annotations
from typing import List
from polynomial import Polynomial

# Simple lexer + shunting-yard for univariate polynomials
class Tok:
	def __init__(self, kind: str, lex: str = "", num: float | None = None):
		self.kind, self.lex, self.num = kind, lex, num

def _implicit_mul(toks: List[Tok], prev: Tok | None) -> None:
	# "5x", "2(x+1)", ")(" and "x(" all mean multiplication
	if prev and prev.kind in ('ID','NUM',')'):
		toks.append(Tok('*', '*'))

def tokenize(expr: str, var: str = "x") -> List[Tok]:
	s = expr
	i, n = 0, len(s)
	toks: List[Tok] = []
	prev = None
	while i < n:
		c = s[i]
		if c.isspace():
			i += 1; continue
		if c in "+-*/^()":
			k = c
			i += 1
			# unary minus
			if k == '-' and (prev is None or prev.kind in ('+','-','*','/','^','(','NEG')):
				k = 'NEG'
			if k == '(':
				_implicit_mul(toks, prev)
			t = Tok(k, k)
			toks.append(t)
			prev = t; continue
		# number (int or decimal)
		if c.isdigit() or (c == '.' and i+1 < n and s[i+1].isdigit()):
			j = i
			has_dot = False
			while j < n and (s[j].isdigit() or (s[j]=='.' and not has_dot)):
				has_dot = has_dot or s[j]=='.'
				j += 1
			# exponent part, as in 1e-07; only taken when digits follow the e
			k2 = j+1
			if k2 < n and s[k2] in '+-':
				k2 += 1
			if j < n and s[j] in 'eE' and k2 < n and s[k2].isdigit():
				j = k2
				while j < n and s[j].isdigit():
					j += 1
			num_str = s[i:j]
			_implicit_mul(toks, prev)
			toks.append(Tok('NUM', num_str, float(num_str)))
			i = j; prev = toks[-1]; continue
		# identifier
		if c.isalpha() or c == '_':
			j = i+1
			while j < n and (s[j].isalnum() or s[j]=='_'):
				j += 1
			name = s[i:j]
			if name != var:
				raise ValueError(f"Unknown variable '{name}', expected '{var}'")
			_implicit_mul(toks, prev)
			toks.append(Tok('ID', name))
			i = j; prev = toks[-1]; continue
		raise ValueError(f"Unexpected char {c}")
	return toks

prec = {'^':5,'NEG':4,'*':2,'/':2,'+':1,'-':1}
right_assoc = {'NEG', '^'}

def to_rpn(toks: List[Tok]) -> List[Tok]:
	out: List[Tok] = []
	op: List[Tok] = []
	for t in toks:
		if t.kind in ('NUM','ID'):
			out.append(t)
		elif t.kind == 'NEG':
			# prefix operator, binds looser than ^ so -x^2 is -(x^2)
			op.append(t)
		elif t.kind in prec:
			while op and op[-1].kind != '(' and ((t.kind in right_assoc and prec[t.kind] < prec[op[-1].kind]) or (t.kind not in right_assoc and prec[t.kind] <= prec[op[-1].kind])):
				out.append(op.pop())
			op.append(t)
		elif t.kind == '(':
			op.append(t)
		elif t.kind == ')':
			while op and op[-1].kind != '(':
				out.append(op.pop())
			if not op: raise ValueError("Mismatched parens")
			op.pop()
		else:
			raise ValueError("Unknown token kind")
	while op:
		if op[-1].kind == '(': raise ValueError("Mismatched parens")
		out.append(op.pop())
	return out


def _as_constant(p: Polynomial, what: str) -> float:
	d = p.degree()
	if d is not None and d > 0:
		raise ValueError(f"{what} must be constant")
	return p.coefficient(0)


def eval_rpn(rpn: List[Tok]) -> Polynomial:
	stack: List[Polynomial] = []
	for t in rpn:
		if t.kind == 'NUM':
			stack.append(Polynomial.constant(t.num))
		elif t.kind == 'ID':
			stack.append(Polynomial.variable())
		elif t.kind == 'NEG':
			if not stack: raise ValueError("neg missing operand")
			stack.append(-stack.pop())
		elif t.kind in ('+','-','*','/','^'):
			if len(stack) < 2: raise ValueError("binary op missing operands")
			b = stack.pop(); a = stack.pop()
			if t.kind == '+': stack.append(a + b)
			elif t.kind == '-': stack.append(a - b)
			elif t.kind == '*': stack.append(a * b)
			elif t.kind == '/':
				# only allow division by constant
				den = _as_constant(b, "Divisor")
				if den == 0: raise ZeroDivisionError("division by zero")
				stack.append(Polynomial({p: c / den for p, c in a.coeffs.items()}))
			elif t.kind == '^':
				exp = _as_constant(b, "Exponent")
				if not exp.is_integer() or exp < 0: raise ValueError("Exponent must be non-negative integer")
				stack.append(a.pow(int(exp)))
		else:
			raise ValueError("Unknown RPN token")
	if len(stack) != 1: raise ValueError("Invalid expression")
	return stack[-1]


def parse_polynomial(expr: str, var: str = "x") -> Polynomial:
	toks = tokenize(expr, var)
	rpn = to_rpn(toks)
	return eval_rpn(rpn)
