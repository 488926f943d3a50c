from treelib import Tree as TreeTree


class DivisionByZero(ZeroDivisionError):
    # DIV node (or an inverse solve) divided by zero, recoverable
    pass

class OpenNodeEvaluated(RuntimeError):
    # tried to evaluate a tree that still has open slots
    pass

class RequiredValueUndefined(ValueError):
    # required value asked of a tree without exactly one open slot
    pass


def _div(a, b):
    if b == 0:
        raise DivisionByZero("division by zero")
    return a / b


def fmt_number(val):
    """
    Print integral values without a trailing '.0'.
    """
    if isinstance(val, float) and val.is_integer():
        return str(int(val))
    return str(val)


class OpInfo():
    # struct describing arithmetic operations
    def __init__(self, func, name, symbol, solve_left, solve_right, commutative=False):
        self.func = func # func pointer/lambda, (lhs, rhs) -> value
        self.name = name # string
        self.symbol = symbol # single char, used for printing and ordering
        self.solve_left = solve_left # (target, rhs) -> lhs
        self.solve_right = solve_right # (target, lhs) -> rhs
        self.commutative = commutative

    def apply(self, lhs, rhs):
        return self.func(lhs, rhs)

    def __repr__(self):
        return self.name

class _OperationHolder():
    # fake enum
    def __init__(self):
        self.ADD = OpInfo(
            lambda a, b: a+b, "ADD", '+',
            lambda t, rhs: t-rhs, lambda t, lhs: t-lhs,
            commutative=True
        )
        self.SUB = OpInfo(
            lambda a, b: a-b, "SUB", '-',
            lambda t, rhs: t+rhs, lambda t, lhs: lhs-t
        )
        self.MULT = OpInfo(
            lambda a, b: a*b, "MULT", '*',
            lambda t, rhs: _div(t, rhs), lambda t, lhs: _div(t, lhs),
            commutative=True
        )
        self.DIV = OpInfo(
            _div, "DIV", '/',
            lambda t, rhs: t*rhs, lambda t, lhs: _div(lhs, t)
        )
        # expansion order used by every search
        self.ALL = [self.ADD, self.SUB, self.MULT, self.DIV]

    def __iter__(self):
        return iter(self.ALL)
OPERATIONS = _OperationHolder() # instantiate enum


# sort keys for canonical ordering, open slots go last
ORDER_LEAF = 0
ORDER_OP = 1
ORDER_OPEN = 2


class Expr:
    """
    Base of the immutable expression tree. Every fill returns a new tree.
    """
    is_leaf = True

    def evaluable(self):
        return self.open_count() == 0

    def required_value(self, target):
        """
        Value the single open slot must hold for this tree to evaluate to target.
        :param target: Value the whole tree should evaluate to
        """
        if self.open_count() != 1:
            raise RequiredValueUndefined(
                "required value needs exactly one open slot, found "+str(self.open_count())
            )
        return self.required(target)

    def consumed_numbers(self):
        return self.numbers()

    def canonical(self):
        return True

    def children(self):
        return []

    def show(self, tree=None, parent=None):
        """
        Use treelib to visualize this node and its children in the terminal.
        :param tree: Instantiated tree object
        :param parent: Pointer back to parent TreeNode
        NOTE: parameters are intended for internal use, not user
        """
        # make sure there is a tree
        my_tree = tree
        if tree is None:
            my_tree = TreeTree()
        # create tree node for this
        my_node = my_tree.create_node(self.label(), parent=parent)
        # recursively have children add themselves to the tree
        for child in self.children():
            child.show(tree=my_tree, parent=my_node)
        # show if this owns the tree
        if tree is None:
            my_tree.show()
        return my_tree

    def __repr__(self):
        return "<" + type(self).__name__ + " " + str(self) + ">"


class OpenNode(Expr):

    def open_count(self):
        return 1

    def evaluate(self):
        raise OpenNodeEvaluated("cannot evaluate expression tree with open node")

    def fill_left(self, repl):
        return repl

    def numbers(self):
        return ()

    def required(self, target):
        return target

    def is_open(self):
        return True

    def evaluate_missing(self):
        return 0.

    def order(self):
        return (ORDER_OPEN,)

    def label(self):
        return "."

    def to_infix(self):
        return "."

    def __str__(self):
        return "."


class LeafNode(Expr):

    def __init__(self, val):
        """
        :param val: The number this literal places into the tree
        """
        self.val = val

    def open_count(self):
        return 0

    def evaluate(self):
        return self.val

    def fill_left(self, repl):
        return self

    def numbers(self):
        return (self.val,)

    def required(self, target):
        raise RequiredValueUndefined("cannot compute required value of a literal")

    def is_open(self):
        return False

    def evaluate_missing(self):
        return self.val

    def order(self):
        return (ORDER_LEAF, self.val)

    def label(self):
        return fmt_number(self.val)

    def to_infix(self):
        return fmt_number(self.val)

    def __str__(self):
        return fmt_number(self.val)


class Node(Expr):
    is_leaf = False

    def __init__(self, operation, op_a=None, op_b=None):
        """
        :param operation: OpInfo describing the node's operation
        :param op_a: Left child, a fresh open slot if None
        :param op_b: Right child, a fresh open slot if None
        """
        self.operation = operation
        self.name = operation.name
        self.op_a = op_a if op_a is not None else OpenNode()
        self.op_b = op_b if op_b is not None else OpenNode()

        # children never change, so the count is fixed at construction
        self._open = self.op_a.open_count() + self.op_b.open_count()

    def open_count(self):
        return self._open

    def evaluate(self):
        return self.operation.apply(self.op_a.evaluate(), self.op_b.evaluate())

    def fill_left(self, repl):
        """
        Return a new tree with the left-most open slot replaced by repl.
        Only the path down to the slot is rebuilt, untouched subtrees are shared.
        :param repl: Tree to put in the slot
        """
        if self._open == 0:
            return self
        if self.op_a.open_count() > 0:
            return Node(self.operation, self.op_a.fill_left(repl), self.op_b)
        return Node(self.operation, self.op_a, self.op_b.fill_left(repl))

    def numbers(self):
        return tuple(sorted(self.op_a.numbers() + self.op_b.numbers()))

    def required(self, target):
        # assumes exactly one open slot below
        if self.op_a.evaluable():
            return self.op_b.required(self.operation.solve_right(target, self.op_a.evaluate()))
        return self.op_a.required(self.operation.solve_left(target, self.op_b.evaluate()))

    def is_open(self):
        return self.op_a.is_open() and self.op_b.is_open()

    def evaluate_missing(self):
        if self.op_a.is_open():
            return self.op_b.evaluate_missing()
        elif self.op_b.is_open():
            if self.op_a.evaluable():
                try:
                    return self.op_a.evaluate()
                except DivisionByZero:
                    return 0.
            return self.op_a.evaluate_missing()
        return 0.

    def order(self):
        return (ORDER_OP, self.operation.symbol)

    def canonical(self):
        if not (self.op_a.canonical() and self.op_b.canonical()):
            return False
        if self.operation.commutative:
            return self.op_a.order() <= self.op_b.order()
        return True

    def children(self):
        return [self.op_a, self.op_b]

    def label(self):
        return self.operation.symbol

    def to_infix(self):
        return "(" + self.op_a.to_infix() + self.operation.symbol + self.op_b.to_infix() + ")"

    def __str__(self):
        return self.operation.symbol + " " + str(self.op_a) + " " + str(self.op_b)


def infix(expr):
    """
    Infix string without the redundant outer parentheses.
    """
    s = expr.to_infix()
    if not expr.is_leaf:
        return s[1:-1]
    return s


def treequals(a, b, mem=None):
    """
    Check whether two trees are equal up to swapping the operands of commutative nodes.
    """
    if mem is None:
        mem = {}
    key = (id(a), id(b))
    if key in mem.keys():
        return mem[key]

    if type(a) is not type(b):
        mem[key] = False
        return False

    if isinstance(a, Node):
        if a.operation is not b.operation:
            mem[key] = False
            return False
        same = treequals(a.op_a, b.op_a, mem) and treequals(a.op_b, b.op_b, mem)
        if not same and a.operation.commutative:
            same = treequals(a.op_a, b.op_b, mem) and treequals(a.op_b, b.op_a, mem)
        mem[key] = same
        return same

    if isinstance(a, LeafNode):
        mem[key] = a.val == b.val
        return mem[key]

    # both open
    mem[key] = True
    return True
