# patternkit

Compact implementations of classic object-oriented design patterns, plus two
in-place array algorithms, written to be read and experimented with. It has
no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Pattern / topic | Main names |
| --- | --- | --- |
| `patternkit.arrays` | Two pointers, merge sort | `move_zeros`, `merge_sort` |
| `patternkit.payment_chain` | Chain of responsibility | `PaymentGateway`, `PhonePeGateway`, `StripeGateway` |
| `patternkit.auction` | Mediator | `Mediator`, `AuctionMediator`, `Bidder` |
| `patternkit.memento` | Memento | `State`, `Snapshot`, `Original`, `History` |
| `patternkit.visitor` | Visitor | `Shape`, `Circle`, `Rect`, `ShapeVisitor`, `AreaVisitor`, `CsvVisitor` |
| `patternkit.factory` | Factory | `ShapeKind`, `Shape`, `Circle`, `Rect`, `ShapeFactory` |
| `patternkit.application` | Builder | `Application`, `ApplicationBuilder` |
| `patternkit.config` | Singleton | `Config` |
| `patternkit.filesystem` | Composite | `FileSystemNode`, `FileNode`, `DirectoryNode` |
| `patternkit.pizza` | Decorator | `Pizza`, `BaseMargherita`, `BaseLeanCrust`, `PizzaDecorator`, `CheeseBlastDecorator`, `ChickenDecorator`, `TomatoDecorator` |
| `patternkit.payments_proxy` | Proxy | `PaymentsService`, `PaymentsServiceImpl`, `CachedPaymentsService`, `LoggedPaymentsService` |
| `patternkit.demos` | Walk-throughs of the patterns | `main`, `DEMOS` |

A few behaviours worth knowing:

- `move_zeros` changes the list in place and returns `None`; `merge_sort`
  sorts in place and returns the same list.
- `PhonePeGateway` accepts amounts up to 100, `StripeGateway` amounts above
  100 and up to 200. A gateway that declines passes the request to the next
  one set with `set_next`; the end of the chain returns `None`.
- `History.undo()` drops the latest snapshot and returns the one before it,
  or `None` when nothing is left.
- Circle areas use 3.14 for pi.
- `ShapeFactory.create_shape` raises `ValueError` for anything that is not a
  `ShapeKind`.
- `ApplicationBuilder.build()` raises `ValueError` when `api_key` or
  `jwt_secret` is missing; keep-alive defaults to 5 seconds and port to 3000.
- `Config.get_instance()` creates the shared instance on first use and
  returns the same object afterwards.
- Visitors, directory listings, bidders and the payment services print what
  they do; visitors and `ls()` also return the printed lines, and `Bidder`
  keeps the bids it received in `messages`.

## Examples

Move zeros to the end of a list while keeping the other values in order:

```python
from patternkit.arrays import merge_sort, move_zeros

nums = [1, 0, 2, 3, 0, 4, 0, 1]
move_zeros(nums)
print(nums)  # [1, 2, 3, 4, 1, 0, 0, 0]

print(merge_sort([7, 4, 1, 5, 3]))  # [1, 3, 4, 5, 7]
```

Try payment gateways in turn until one accepts the amount:

```python
from patternkit.payment_chain import PhonePeGateway, StripeGateway

phonepe = PhonePeGateway()
phonepe.set_next(StripeGateway())

print(phonepe.create_payment_url(1, 100))  # PhonePe handles it
print(phonepe.create_payment_url(2, 200))  # passed on to Stripe
print(phonepe.create_payment_url(3, 300))  # None: nobody accepts it
```

Build an application configuration:

```python
from patternkit.application import ApplicationBuilder

builder = ApplicationBuilder(api_key="placeholder", jwt_secret="secret")
builder.port = 3030
print(builder.build())
```

Wrap a pizza in toppings:

```python
from patternkit.pizza import BaseMargherita, CheeseBlastDecorator, TomatoDecorator

pizza = TomatoDecorator(CheeseBlastDecorator(BaseMargherita()))
print(pizza.cost())         # 315.0
print(pizza.ingredients())  # ['Cheese Blast', 'Margherita', 'Tomatoes']
```

Undo moves with a history of snapshots:

```python
from patternkit.memento import History, Original, State

original = Original(State(0, 0))
history = History()
history.add_snapshot(original.snap())
original.move(1, 2)
history.add_snapshot(original.snap())
original.move(4, 5)
history.add_snapshot(original.snap())

restored = history.undo()
if restored is not None:
    original.restore(restored)
print(original.state)  # State{x=1, y=2}
```

## Demonstrations

Every pattern comes with a short walk-through that prints what happens step
by step. Run them all with:

```
patternkit-demos
```

or name the ones to run:

```
patternkit-demos chain proxy
```

The available names are `chain`, `mediator`, `memento`, `visitor`,
`factory`, `singleton`, `composite`, `decorator` and `proxy`. An unknown name
is reported as an error. The same walk-throughs can be called from Python
through `patternkit.demos.DEMOS`, which maps each name to its function.

## What it does not do

The payment gateways and payment services only build fixed example URLs;
nothing talks to a real payment provider. The builder module has a single
`ApplicationBuilder` and no preset variants of it, and the walk-throughs do
not include one for it or for the array algorithms.