# Shardeum MCP - Prompt Templates
#
# 各関数は検証済みの引数（デフォルト適用済み）を受け取り、対応するツールの利用を指示する文面を返す。

from typing import Any, Dict


def address_balance(args: Dict[str, Any]) -> str:
    return f"""Use eth_getBalance to conduct a comprehensive financial analysis for address {args['address']} at block {args['blockParameter']}:

1. Retrieve native token balance
2. Perform in-depth financial investigation:
   - Current balance in native tokens
   - Historical balance trends
   - Wallet activity indicators
   - Potential account type classification

Provide contextual insights into the account's financial status and blockchain interaction patterns."""


def block_number(args: Dict[str, Any]) -> str:
    return """Use eth_blockNumber to analyze the current state of the Shardeum blockchain:

1. Retrieve the latest block number
2. Provide context about:
   - Network progression
   - Recent blockchain activity
   - Synchronization status

Highlight the significance of the current block number in the network's timeline."""


def transaction_count(args: Dict[str, Any]) -> str:
    return f"""Use eth_getTransactionCount to perform a comprehensive analysis of transaction history for address {args['address']} at block {args['blockParameter']}:

1. Retrieve total number of transactions sent
2. Analyze account activity:
   - Transaction frequency
   - Account age and maturity
   - Potential account type (user, contract, exchange)
   - Historical transaction patterns

Provide insights into the account's blockchain interaction and significance."""


def block_transactions_by_hash(args: Dict[str, Any]) -> str:
    return f"""Use eth_getBlockTransactionCountByHash to conduct a detailed analysis of block transactions for hash {args['blockHash']}:

1. Retrieve total number of transactions in the block
2. Investigate block characteristics:
   - Transaction density
   - Block utilization
   - Potential network activity indicators
   - Comparison with recent blocks

Provide context about the block's significance and network performance."""


def block_transactions_by_number(args: Dict[str, Any]) -> str:
    return f"""Use eth_getBlockTransactionCountByNumber to perform an in-depth analysis of block {args['blockNumber']}:

1. Retrieve the number of transactions in the block
2. Analyze block characteristics:
   - Transaction volume
   - Network activity levels
   - Potential network events or congestion
   - Comparative analysis with network averages

Provide insights into the block's role in the blockchain ecosystem."""


def estimate_gas(args: Dict[str, Any]) -> str:
    details = [
        f"- From: {args['from']}" if args.get("from") else "No sender specified",
        f"- To: {args['to']}" if args.get("to") else "No recipient specified",
        f"- Value: {args['value']}" if args.get("value") else "No value specified",
        "- Custom data present" if args.get("data") else "No custom data",
    ]
    return """Use eth_estimateGas to conduct a comprehensive gas cost analysis for a transaction:

1. Estimate gas requirements
2. Analyze transaction cost factors:
   - Computational complexity
   - Network congestion impact
   - Gas price estimation
   - Potential optimization strategies

Provide detailed insights into transaction economics and efficiency.

Transaction Details:
""" + "\n".join(details)


def _transaction_detail(full_transactions: bool) -> str:
    return "with full transaction information" if full_transactions else "with transaction summaries"


def block_by_hash(args: Dict[str, Any]) -> str:
    return f"""Use eth_getBlockByHash to perform a comprehensive analysis of block with hash {args['blockHash']}:

1. Retrieve block details {_transaction_detail(args['fullTransactions'])}
2. Analyze block characteristics:
   - Block structure and metadata
   - Validator/Miner information
   - Transaction composition
   - Network performance indicators

Provide deep insights into the block's role in the blockchain ecosystem."""


def block_by_number(args: Dict[str, Any]) -> str:
    return f"""Use eth_getBlockByNumber to conduct an in-depth analysis of block number {args['blockNumber']}:

1. Retrieve block details {_transaction_detail(args['fullTransactions'])}
2. Investigate block characteristics:
   - Detailed block metadata
   - Transaction composition
   - Network state at block generation
   - Performance and security indicators

Provide comprehensive insights into the block's significance."""


def block_receipts(args: Dict[str, Any]) -> str:
    return f"""Use eth_getBlockReceipts to analyze the transaction outcomes for block {args['blockNumberOrHash']}:

1. Retrieve transaction receipts
2. Perform comprehensive receipt analysis:
   - Transaction success rates
   - Gas consumption details
   - Logs and event information
   - Blockchain state changes

Provide forensic insights into the block's transaction execution."""


def transaction_by_hash(args: Dict[str, Any]) -> str:
    return f"""Use eth_getTransactionByHash to perform a comprehensive forensic analysis of transaction {args['txHash']}:

1. Retrieve complete transaction details
2. Conduct in-depth transaction investigation:
   - Sender and recipient information
   - Transaction value and type
   - Gas price and consumption
   - Potential smart contract interactions
   - Blockchain context

Provide detailed insights into the transaction's significance and characteristics."""


def transaction_by_block_hash_index(args: Dict[str, Any]) -> str:
    return f"""Use eth_getTransactionByBlockHashAndIndex to analyze the specific transaction at index {args['transactionIndex']} in block with hash {args['blockHash']}:

1. Retrieve transaction details
2. Investigate transaction context:
   - Position within block
   - Relationship to other transactions
   - Detailed transaction characteristics
   - Block-level insights

Provide comprehensive analysis of the transaction's role and significance."""


def transaction_by_block_number_index(args: Dict[str, Any]) -> str:
    return f"""Use eth_getTransactionByBlockNumberAndIndex to perform a detailed analysis of the transaction at index {args['transactionIndex']} in block number {args['blockNumber']}:

1. Retrieve transaction details
2. Conduct comprehensive investigation:
   - Transaction positioning
   - Block-level context
   - Detailed transaction characteristics
   - Network state analysis

Provide insights into the transaction's significance within its block."""


def transaction_receipt(args: Dict[str, Any]) -> str:
    return f"""Use eth_getTransactionReceipt to perform a forensic analysis of the transaction receipt for {args['txHash']}:

1. Retrieve complete transaction receipt
2. Conduct in-depth receipt investigation:
   - Transaction execution status
   - Gas used and actual cost
   - Logs and event details
   - State changes and contract interactions
   - Success or failure indicators

Provide comprehensive insights into the transaction's final outcome."""


def chain_id(args: Dict[str, Any]) -> str:
    return """Use eth_chainId to analyze the network identification and characteristics:

1. Retrieve the chain ID
2. Investigate network details:
   - Unique network identifier
   - Network type (mainnet/testnet)
   - Ecosystem compatibility
   - Potential cross-chain implications

Provide comprehensive insights into the network's identification and context."""


def shardeum_node_list(args: Dict[str, Any]) -> str:
    return f"""Use shardeum_getNodeList to perform a comprehensive analysis of Shardeum network nodes:

1. Retrieve node list for page {args['page']} with {args['limit']} nodes per page
2. Investigate network node composition:
   - Node distribution
   - Network health indicators
   - Staking and validator information
   - Network decentralization metrics

Provide detailed insights into the Shardeum network's node ecosystem."""


def shardeum_network_account(args: Dict[str, Any]) -> str:
    return """Use shardeum_getNetworkAccount to conduct a comprehensive analysis of the Shardeum network account:

1. Retrieve network account details
2. Investigate network parameters:
   - Network governance information
   - Staking and reward mechanisms
   - Network economic model
   - Cycle and maintenance details

Provide deep insights into the Shardeum network's economic and operational structure."""


def shardeum_cycle_info(args: Dict[str, Any]) -> str:
    cycle_number = args.get("cycleNumber")
    target = f"cycle number {cycle_number}" if cycle_number is not None else "the current network cycle"
    return f"""Use shardeum_getCycleInfo to analyze {target}:

1. Retrieve detailed cycle information
2. Investigate cycle characteristics:
   - Node activity and composition
   - Network synchronization state
   - Performance metrics
   - Validator and staking dynamics

Provide comprehensive insights into the Shardeum network's current operational cycle."""
