"""
repositories/ - Department and Seller Persistence
=================================================
A GenericRepository contract plus one PostgreSQL implementation per table.
Seller reads join the department table and return Sellers with their
Department attached.
"""
