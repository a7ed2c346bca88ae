"""
Example of a lazy combo box session backed by pagedlist.

A "service" holds 1000 people. The widget side only ever talks to the view
through get/size/set_filter/refresh, and the service is hit once per page.
"""

import logging

from pydantic import BaseModel

from pagedlist import FilterScopedListView, ListProvider


class Person(BaseModel):
    """Person record as returned by a service layer"""

    id: int
    first_name: str
    last_name: str

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"


logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

first_names = ["Alice", "Bob", "Carol", "Dave", "Eve", "Frank", "Grace", "Heidi", "Ivan", "Judy"]
last_names = ["Smith", "Jones", "Brown", "Black", "Hall", "Malik", "Klein", "Lopez", "Nowak", "Kim"]

service = ListProvider(
    Person(id=i, first_name=first_names[i % 10], last_name=f"{last_names[(i // 10) % 10]}{i}")
    for i in range(1000)
)

PAGE_SIZE = 30
combo = FilterScopedListView(
    service.paging_provider(PAGE_SIZE), service.count_provider(), page_size=PAGE_SIZE
)

# The popup renders its first rows
print("\n1. First screen (10 rows):")
for index in range(10):
    print(f"   {index}: {combo.get(index)}")
print(f"   total: {combo.size()}, service calls: {service.find_calls} find / {service.count_calls} count")

# Scrolling within the first page costs nothing
print("\n2. Scroll inside the cached page:")
print(f"   row 25: {combo[25]}, service calls: {service.find_calls} find")

# The user types a filter
print("\n3. User types 'grace':")
combo.set_filter("grace")
print(f"   matches: {combo.size()}, first: {combo.get(0)}")

# Selecting, then reopening the popup re-issues the caption as a filter
selected = combo.get(3)
combo.select(selected)
print(f"\n4. Selected '{selected}', popup reopened:")
combo.set_filter(str(selected))
print(f"   effective filter: {combo.current_filter!r}, size: {combo.size()}")

# Someone wrote to the backend
print("\n5. Backend changed, refresh:")
service.items.append(Person(id=1000, first_name="Zoe", last_name="New"))
combo.refresh()
print(f"   size: {combo.size()}, last: {combo[-1]}")

print("\n" + "=" * 80)
print(f"Done. Service calls: {service.find_calls} find / {service.count_calls} count")
print("=" * 80)
